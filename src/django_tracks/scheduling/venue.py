"""Venue time windows and duration bounds.

A :class:`VenueConfig` is an immutable value passed explicitly into every
engine component, so tests and management commands can vary venue parameters
without touching process-wide state.
"""

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import time
from typing import Any

from django_tracks.scheduling.clock import add_minutes, parse_time, to_minutes

_TIME_FIELDS = frozenset({"morning_start", "lunch_start", "networking_start", "networking_end"})
_POSITIVE_INT_FIELDS = ("lunch_duration", "networking_duration", "lightning_duration", "max_duration")


@dataclass(frozen=True, slots=True)
class VenueConfig:
    """Time windows for one conference day.

    The morning block runs from ``morning_start`` until ``lunch_start``.  The
    afternoon block begins once lunch is over and must leave room for the
    networking event, which starts somewhere between ``networking_start`` and
    ``networking_end``.

    Attributes:
        morning_start: When the first morning talk may begin.
        lunch_start: Hard end of the morning block.
        lunch_duration: Length of the lunch break in minutes.
        networking_start: Earliest start of the networking event.
        networking_end: Latest start of the networking event; no talk may run
            past it.
        networking_duration: Nominal length of the networking event.
        lightning_duration: Fixed length of every lightning talk.
        min_duration: Exclusive lower bound for talk durations.
        max_duration: Inclusive upper bound for talk durations.
        lunch_label: Description used for the lunch item.
        networking_label: Description used for the networking item.
    """

    morning_start: time = time(9, 0)
    lunch_start: time = time(12, 0)
    lunch_duration: int = 60
    networking_start: time = time(16, 0)
    networking_end: time = time(17, 0)
    networking_duration: int = 60
    lightning_duration: int = 5
    min_duration: int = 1
    max_duration: int = 60
    lunch_label: str = "Lunch"
    networking_label: str = "Networking Session"

    def __post_init__(self) -> None:
        for name in _TIME_FIELDS:
            if not isinstance(getattr(self, name), time):
                msg = f"VenueConfig.{name} must be a datetime.time"
                raise TypeError(msg)
        for name in _POSITIVE_INT_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                msg = f"VenueConfig.{name} must be a positive integer"
                raise ValueError(msg)
        if not isinstance(self.min_duration, int) or self.min_duration < 0:
            msg = "VenueConfig.min_duration must be a non-negative integer"
            raise ValueError(msg)
        if self.max_duration <= self.min_duration:
            msg = "VenueConfig.max_duration must be greater than min_duration"
            raise ValueError(msg)
        if not self.min_duration < self.lightning_duration <= self.max_duration:
            msg = "VenueConfig.lightning_duration must be above min_duration and at most max_duration"
            raise ValueError(msg)
        if self.morning_start >= self.lunch_start:
            msg = "VenueConfig.morning_start must be before lunch_start"
            raise ValueError(msg)
        if to_minutes(self.lunch_start) + self.lunch_duration >= 24 * 60:
            msg = "VenueConfig lunch must end before midnight"
            raise ValueError(msg)
        if self.afternoon_start > self.networking_start:
            msg = "VenueConfig.networking_start must not be before the end of lunch"
            raise ValueError(msg)
        if self.networking_start > self.networking_end:
            msg = "VenueConfig.networking_end must not be before networking_start"
            raise ValueError(msg)
        for name in ("lunch_label", "networking_label"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                msg = f"VenueConfig.{name} must be a non-empty string"
                raise ValueError(msg)

    @property
    def afternoon_start(self) -> time:
        """When the afternoon block opens: the end of lunch."""
        return add_minutes(self.lunch_start, self.lunch_duration)

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        label: str = "venue",
        *,
        base: "VenueConfig | None" = None,
    ) -> "VenueConfig":
        """Build a ``VenueConfig`` from a plain mapping of overrides.

        Time fields accept ``datetime.time`` values (as produced by TOML local
        times) or ``"HH:MM"`` strings.  Missing keys keep the value from
        *base*, or the class default when no base is given.

        Args:
            data: Field overrides keyed by attribute name.
            label: Human-readable context for error messages.
            base: Optional configuration the overrides are layered on.

        Returns:
            A validated ``VenueConfig``.

        Raises:
            TypeError: If *data* is not a mapping or a time field has the
                wrong type.
            ValueError: If *data* contains unknown keys or invalid values.
        """
        if not isinstance(data, Mapping):
            msg = f"{label} must be a mapping (dict-like object)"
            raise TypeError(msg)

        known = {f.name for f in dataclasses.fields(cls)}
        unknown = set(data) - known
        if unknown:
            msg = f"{label} has unknown fields: {', '.join(sorted(unknown))}"
            raise ValueError(msg)

        values = dataclasses.asdict(base) if base is not None else {}
        values.update(data)
        for name in _TIME_FIELDS.intersection(data):
            try:
                values[name] = parse_time(values[name])
            except (TypeError, ValueError) as exc:
                msg = f"{label}['{name}']: {exc}"
                raise type(exc)(msg) from exc
        return cls(**values)

    def replace(self, **changes: Any) -> "VenueConfig":
        """Return a copy with *changes* applied (and re-validated)."""
        return dataclasses.replace(self, **changes)
