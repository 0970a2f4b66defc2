"""Track builder: pack proposals into as many conference days as needed.

Usage::

    from django_tracks.scheduling import build_tracks

    tracks = build_tracks([("Rails Magic", "60min"), ("Rails for Python Developers", "lightning")])
    for track in tracks:
        print(track.day_sequence, [item.description for item in track.items])
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from django_tracks.scheduling.blocks import AfternoonBlock, MorningBlock
from django_tracks.scheduling.exceptions import NoForwardProgress
from django_tracks.scheduling.items import SessionItem
from django_tracks.scheduling.normalizer import normalize_proposals
from django_tracks.scheduling.pool import ProposalPool
from django_tracks.scheduling.venue import VenueConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Track:
    """One conference day: the morning items followed by the afternoon items.

    Attributes:
        day_sequence: 1-based position of the day.
        morning: The placed morning items, ending with lunch.
        afternoon: The placed afternoon items, ending with networking.
    """

    day_sequence: int
    morning: tuple[SessionItem, ...]
    afternoon: tuple[SessionItem, ...]

    @property
    def items(self) -> Iterator[SessionItem]:
        """All items of the day in chronological order."""
        yield from self.morning
        yield from self.afternoon

    @property
    def proposals(self) -> list[SessionItem]:
        """The talks and lightning talks placed on this day."""
        return [item for item in self.items if not item.kind.is_filler]


class ConferenceScheduler:
    """Greedy first-fit scheduler for conference tracks.

    Proposals are offered longest first.  Tracks are built strictly one after
    another because each one depends on what the previous tracks left in the
    pool.

    Args:
        venue: Venue configuration; defaults to a 09:00-17:00 day with lunch
            at noon.
    """

    def __init__(self, venue: VenueConfig | None = None) -> None:
        self.venue = venue or VenueConfig()

    def schedule(self, raw_proposals: Iterable[tuple[str, str | int]]) -> list[Track]:
        """Normalize *raw_proposals* and pack them into tracks.

        Args:
            raw_proposals: ``(title, duration_spec)`` pairs in input order.

        Returns:
            The built tracks, in day order.  Empty when there are no proposals.

        Raises:
            InvalidProposal: If a proposal title is blank.
            InvalidDuration: If a proposal duration is invalid.
            NoForwardProgress: If some proposal cannot fit into any block.
        """
        pool = ProposalPool(normalize_proposals(raw_proposals, self.venue))
        return self.schedule_pool(pool)

    def schedule_pool(self, pool: ProposalPool) -> list[Track]:
        """Pack an already-normalized pool into tracks.

        Raises:
            NoForwardProgress: If a whole track places nothing while
                proposals are still pending.
        """
        tracks: list[Track] = []
        while pool.has_unscheduled:
            track = self._build_track(pool, day_sequence=len(tracks) + 1)
            if not track.proposals:
                raise NoForwardProgress([item.description for item in pool.unscheduled])
            tracks.append(track)

        logger.info("Scheduled %d proposals into %d tracks", pool.placed_count, len(tracks))
        return tracks

    def _build_track(self, pool: ProposalPool, day_sequence: int) -> Track:
        morning = MorningBlock(self.venue)
        morning.arrange(pool)
        afternoon = AfternoonBlock(self.venue)
        afternoon.arrange(pool)

        track = Track(day_sequence=day_sequence, morning=tuple(morning.items), afternoon=tuple(afternoon.items))
        for item in track.items:
            item.validate(self.venue)
        logger.debug("Built track %d with %d proposals", day_sequence, len(track.proposals))
        return track


def build_tracks(
    raw_proposals: Iterable[tuple[str, str | int]],
    venue: VenueConfig | None = None,
) -> list[Track]:
    """Schedule *raw_proposals* with a :class:`ConferenceScheduler`."""
    return ConferenceScheduler(venue).schedule(raw_proposals)
