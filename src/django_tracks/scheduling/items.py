"""Session items: the single record type placed into track schedules.

A proposal is created as an ``UNSCHEDULED`` item and reclassified in place to
``TALK`` or ``LIGHTNING`` when a block places it.  Lunch and networking are
filler items created by the blocks themselves.  Kind-specific validation is
looked up in :data:`_VALIDATORS` by the item's kind.
"""

import enum
from collections.abc import Callable
from dataclasses import dataclass
from datetime import time

from django_tracks.scheduling.clock import add_minutes, to_minutes
from django_tracks.scheduling.exceptions import InvalidDuration, NetworkingWindowViolation, SchedulingError
from django_tracks.scheduling.venue import VenueConfig


class SessionKind(enum.StrEnum):
    """What an item represents in the schedule."""

    UNSCHEDULED = "unscheduled"
    TALK = "talk"
    LIGHTNING = "lightning"
    LUNCH = "lunch"
    NETWORKING = "networking"

    @property
    def is_filler(self) -> bool:
        """``True`` for events inserted by blocks rather than proposed."""
        return self in (SessionKind.LUNCH, SessionKind.NETWORKING)


@dataclass(slots=True)
class SessionItem:
    """One entry in the proposal pool or in a block's schedule.

    Attributes:
        description: Talk title, or the filler label.
        duration: Length in minutes.
        kind: Current classification of the item.
        start_time: Time of day the item starts; ``None`` until placed.
        scheduled_kind: For unscheduled proposals, the kind the item becomes
            once placed (``TALK`` or ``LIGHTNING``).
        sequence: Position of the proposal in the raw input, used to keep
            ties stable.
    """

    description: str
    duration: int
    kind: SessionKind = SessionKind.UNSCHEDULED
    start_time: time | None = None
    scheduled_kind: SessionKind | None = None
    sequence: int = 0

    @property
    def is_unscheduled(self) -> bool:
        return self.kind is SessionKind.UNSCHEDULED

    @property
    def end_time(self) -> time | None:
        """When the item ends, or ``None`` if it has not been placed."""
        if self.start_time is None:
            return None
        return add_minutes(self.start_time, self.duration)

    def place(self, start_time: time) -> None:
        """Reclassify a pending proposal to its scheduled kind and stamp its start.

        Raises:
            SchedulingError: If the item is not an unscheduled proposal.
        """
        if not self.is_unscheduled or self.scheduled_kind is None:
            msg = f"{self.description!r} is not a pending proposal (kind={self.kind})"
            raise SchedulingError(msg)
        self.kind = self.scheduled_kind
        self.start_time = start_time

    def validate(self, venue: VenueConfig) -> None:
        """Run the validation rule registered for this item's kind.

        Raises:
            InvalidDuration: If a proposal's duration is out of range.
            NetworkingWindowViolation: If a placed item lies outside its window.
        """
        _VALIDATORS[self.kind](self, venue)

    @classmethod
    def lunch(cls, start_time: time, venue: VenueConfig) -> "SessionItem":
        return cls(
            description=venue.lunch_label,
            duration=venue.lunch_duration,
            kind=SessionKind.LUNCH,
            start_time=start_time,
        )

    @classmethod
    def networking(cls, start_time: time, venue: VenueConfig) -> "SessionItem":
        return cls(
            description=venue.networking_label,
            duration=venue.networking_duration,
            kind=SessionKind.NETWORKING,
            start_time=start_time,
        )


def _validate_duration(item: SessionItem, venue: VenueConfig) -> None:
    # The lower bound is exclusive: a talk of exactly ``min_duration`` minutes is rejected.
    if item.duration <= venue.min_duration or item.duration > venue.max_duration:
        raise InvalidDuration(
            item.description,
            item.duration,
            f"must be greater than {venue.min_duration} and at most {venue.max_duration} minutes",
        )


def _within(item: SessionItem, start: time, end: time) -> bool:
    if item.start_time is None:
        return False
    return start <= item.start_time and to_minutes(item.start_time) + item.duration <= to_minutes(end)


def _validate_scheduled_talk(item: SessionItem, venue: VenueConfig) -> None:
    _validate_duration(item, venue)
    in_morning = _within(item, venue.morning_start, venue.lunch_start)
    in_afternoon = _within(item, venue.afternoon_start, venue.networking_end)
    if not (in_morning or in_afternoon):
        raise NetworkingWindowViolation(item.description, item.start_time, "talk")


def _validate_lunch(item: SessionItem, venue: VenueConfig) -> None:
    if item.start_time is None or not venue.morning_start <= item.start_time <= venue.lunch_start:
        raise NetworkingWindowViolation(item.description, item.start_time, "lunch")


def _validate_networking(item: SessionItem, venue: VenueConfig) -> None:
    if item.start_time is None or not venue.networking_start <= item.start_time <= venue.networking_end:
        raise NetworkingWindowViolation(item.description, item.start_time, "networking")


_VALIDATORS: dict[SessionKind, Callable[[SessionItem, VenueConfig], None]] = {
    SessionKind.UNSCHEDULED: _validate_duration,
    SessionKind.TALK: _validate_scheduled_talk,
    SessionKind.LIGHTNING: _validate_scheduled_talk,
    SessionKind.LUNCH: _validate_lunch,
    SessionKind.NETWORKING: _validate_networking,
}
