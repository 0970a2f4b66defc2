"""Errors raised by the track scheduling engine.

Every error is fatal for the run that raised it: scheduling is a one-shot
batch computation with no retry semantics.
"""

from collections.abc import Sequence
from datetime import time


class SchedulingError(Exception):
    """Base class for all scheduling engine errors."""


class InvalidProposal(SchedulingError, ValueError):
    """A raw proposal is malformed (for example, it has a blank title)."""


class InvalidDuration(SchedulingError, ValueError):
    """A proposal's duration is unparseable or outside the accepted range.

    Attributes:
        description: Title of the offending proposal.
        duration: The parsed duration in minutes, or the raw spec string when
            it could not be parsed.
    """

    def __init__(self, description: str, duration: int | str, detail: str = "") -> None:
        self.description = description
        self.duration = duration
        msg = f"Invalid duration {duration!r} for proposal {description!r}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class NetworkingWindowViolation(SchedulingError):
    """A placed item starts or ends outside the window its kind allows."""

    def __init__(self, description: str, start_time: time | None, window: str) -> None:
        self.description = description
        self.start_time = start_time
        self.window = window
        super().__init__(f"{description!r} at {start_time} falls outside the {window} window")


class NoForwardProgress(SchedulingError):
    """A whole track was built without placing a single pending proposal.

    Raised instead of looping forever when the remaining proposals cannot fit
    into any block of the configured venue.

    Attributes:
        stuck: Descriptions of the proposals that could not be placed.
    """

    def __init__(self, stuck: Sequence[str]) -> None:
        self.stuck = list(stuck)
        names = ", ".join(repr(name) for name in self.stuck)
        super().__init__(f"No proposal fits into an empty track; unplaceable: {names}")
