"""Time-of-day arithmetic for schedule cursors.

Blocks advance a ``datetime.time`` cursor by whole minutes.  ``datetime.time``
does not support addition, so these helpers round-trip through
minutes-since-midnight instead.
"""

from datetime import time

_MINUTES_PER_DAY = 24 * 60


def to_minutes(value: time) -> int:
    """Return the number of whole minutes between midnight and *value*."""
    return value.hour * 60 + value.minute


def from_minutes(minutes: int) -> time:
    """Build a ``time`` from a minutes-since-midnight count.

    Args:
        minutes: Minutes after midnight, ``0 <= minutes < 1440``.

    Returns:
        The corresponding time of day.

    Raises:
        ValueError: If *minutes* falls outside a single day.
    """
    if not 0 <= minutes < _MINUTES_PER_DAY:
        msg = f"{minutes} minutes is outside a single day"
        raise ValueError(msg)
    return time(minutes // 60, minutes % 60)


def add_minutes(value: time, minutes: int) -> time:
    """Return *value* moved forward by *minutes*."""
    return from_minutes(to_minutes(value) + minutes)


def minutes_between(start: time, end: time) -> int:
    """Return ``end - start`` in minutes; negative when *end* is earlier."""
    return to_minutes(end) - to_minutes(start)


def parse_time(value: time | str) -> time:
    """Parse an ``HH:MM`` string into a ``time``, passing ``time`` values through.

    Args:
        value: A ``datetime.time`` or a 24-hour ``"HH:MM"`` string.

    Returns:
        The parsed time of day.

    Raises:
        ValueError: If the string is not a valid ``HH:MM`` time.
        TypeError: If *value* is neither a string nor a ``time``.
    """
    if isinstance(value, time):
        return value
    if not isinstance(value, str):
        msg = f"Expected a time or 'HH:MM' string, got {type(value).__name__}"
        raise TypeError(msg)
    try:
        return time.fromisoformat(value.strip())
    except ValueError as exc:
        msg = f"Invalid time of day: {value!r}"
        raise ValueError(msg) from exc


def format_12_hour(value: time) -> str:
    """Render *value* on a 12-hour clock, e.g. ``"09:00 AM"`` or ``"01:30 PM"``.

    The suffix does not depend on the process locale.
    """
    suffix = "AM" if value.hour < 12 else "PM"
    hour = value.hour % 12 or 12
    return f"{hour:02d}:{value.minute:02d} {suffix}"
