"""Morning and afternoon packing loops.

Each block owns a start-time cursor that moves forward as proposals are placed.
Blocks read from and write to the shared :class:`ProposalPool`, so a later
block only sees what earlier blocks left behind.
"""

import logging
from datetime import time

from django_tracks.scheduling.clock import add_minutes, minutes_between
from django_tracks.scheduling.items import SessionItem, SessionKind
from django_tracks.scheduling.pool import ProposalPool
from django_tracks.scheduling.venue import VenueConfig

logger = logging.getLogger(__name__)


class Block:
    """A contiguous scheduling window with a moving start cursor.

    Args:
        venue: Venue configuration for the day.
        start: Initial cursor position.
    """

    name = "block"

    def __init__(self, venue: VenueConfig, start: time) -> None:
        self.venue = venue
        self.start = start
        self.cursor = start
        self.items: list[SessionItem] = []

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.start}-{self.cursor} items={len(self.items)}>"

    @property
    def proposals(self) -> list[SessionItem]:
        """Placed proposals, without the filler event."""
        return [item for item in self.items if not item.kind.is_filler]

    def arrange(self, pool: ProposalPool) -> list[SessionItem]:
        """Pack proposals from *pool* into this block and append its filler event."""
        raise NotImplementedError

    def _place(self, pool: ProposalPool, index: int) -> None:
        item = pool.mark_placed(index, self.cursor)
        self.items.append(item)
        self.cursor = add_minutes(self.cursor, item.duration)
        logger.debug("Placed %s %r at %s in %s block", item.kind, item.description, item.start_time, self.name)

    def _has_filler(self, kind: SessionKind) -> bool:
        return any(item.kind is kind for item in self.items)


class MorningBlock(Block):
    """Packs talks between ``morning_start`` and ``lunch_start``, then adds lunch.

    Lunch is stamped with the final cursor.  The cursor can never pass
    ``lunch_start`` because a candidate that would overshoot is rejected by the
    budget check.
    """

    name = "morning"

    def __init__(self, venue: VenueConfig) -> None:
        super().__init__(venue, venue.morning_start)
        self.end = venue.lunch_start

    def arrange(self, pool: ProposalPool) -> list[SessionItem]:
        while (available := minutes_between(self.cursor, self.end)) > 0:
            index = pool.find_next(available)
            if index is None:
                break
            self._place(pool, index)

        if not self._has_filler(SessionKind.LUNCH):
            self.items.append(SessionItem.lunch(self.cursor, self.venue))
            logger.debug("Lunch at %s", self.cursor)
        return self.items


class AfternoonBlock(Block):
    """Packs talks after lunch, then adds the networking event.

    Each step first looks for a proposal that ends by ``networking_start``;
    only when none fits does it allow one that ends by ``networking_end``.
    Networking starts at the final cursor, snapped forward to
    ``networking_start`` when the afternoon finished early.
    """

    name = "afternoon"

    def __init__(self, venue: VenueConfig) -> None:
        super().__init__(venue, venue.afternoon_start)
        self.end = venue.networking_end

    def arrange(self, pool: ProposalPool) -> list[SessionItem]:
        while True:
            index = pool.find_next(minutes_between(self.cursor, self.venue.networking_start))
            if index is None:
                index = pool.find_next(minutes_between(self.cursor, self.venue.networking_end))
                if index is None:
                    break
            self._place(pool, index)

        if not self._has_filler(SessionKind.NETWORKING):
            networking_at = max(self.cursor, self.venue.networking_start)
            self.items.append(SessionItem.networking(networking_at, self.venue))
            logger.debug("Networking at %s", networking_at)
        return self.items
