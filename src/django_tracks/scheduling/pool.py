"""The shared proposal pool and the first-fit slot search.

Scanning (:meth:`ProposalPool.find_next`) and mutation
(:meth:`ProposalPool.mark_placed`) are separate operations so a block never
reclassifies items while it is iterating over them.
"""

from collections.abc import Iterator, Sequence
from datetime import time

from django_tracks.scheduling.exceptions import SchedulingError
from django_tracks.scheduling.items import SessionItem


def find_next(items: Sequence[SessionItem], available_minutes: int) -> int | None:
    """Return the index of the first pending item that fits the budget.

    Items are scanned in their current order.  Because the pool is sorted
    longest first, the first admissible item is also the longest one.

    Args:
        items: The pool, in scheduling order.
        available_minutes: Room left in the block.

    Returns:
        The index of the chosen item, or ``None`` when nothing fits.
    """
    if available_minutes <= 0:
        return None
    for index, item in enumerate(items):
        if item.is_unscheduled and item.duration <= available_minutes:
            return index
    return None


class ProposalPool:
    """Normalized proposals shared by every block of every track.

    Items stay in the pool for the whole run; placing one only reclassifies
    it, so the pool doubles as the record of what has been scheduled.

    Args:
        items: Unscheduled items, already sorted longest first.
    """

    def __init__(self, items: Sequence[SessionItem]) -> None:
        self._items = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[SessionItem]:
        return iter(self._items)

    @property
    def unscheduled(self) -> list[SessionItem]:
        """Items still waiting for a slot, in pool order."""
        return [item for item in self._items if item.is_unscheduled]

    @property
    def has_unscheduled(self) -> bool:
        return any(item.is_unscheduled for item in self._items)

    @property
    def placed_count(self) -> int:
        return sum(1 for item in self._items if not item.is_unscheduled)

    def find_next(self, available_minutes: int) -> int | None:
        """Peek at the next item that fits *available_minutes* without changing it."""
        return find_next(self._items, available_minutes)

    def mark_placed(self, index: int, start_time: time) -> SessionItem:
        """Place the item at *index* starting at *start_time*.

        Args:
            index: Position returned by :meth:`find_next`.
            start_time: The block cursor at placement time.

        Returns:
            The placed item, now classified as a talk or lightning talk.

        Raises:
            SchedulingError: If the item has already been placed.
        """
        item = self._items[index]
        if not item.is_unscheduled:
            msg = f"{item.description!r} has already been placed at {item.start_time}"
            raise SchedulingError(msg)
        item.place(start_time)
        return item
