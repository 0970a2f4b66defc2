"""Turn raw ``(title, duration_spec)`` pairs into a sorted pool of proposals."""

import logging
import re
from collections.abc import Iterable

from django_tracks.scheduling.exceptions import InvalidDuration, InvalidProposal
from django_tracks.scheduling.items import SessionItem, SessionKind
from django_tracks.scheduling.venue import VenueConfig

logger = logging.getLogger(__name__)

_LIGHTNING_MARKER = "lightning"
_MINUTES_RE = re.compile(r"^\s*(?P<minutes>[+-]?\d+)\s*(?:min(?:ute)?s?)?\s*$", re.IGNORECASE)


def parse_duration(description: str, spec: str | int, venue: VenueConfig) -> tuple[int, SessionKind]:
    """Resolve a duration spec into minutes and the kind the proposal will take.

    Any spec mentioning ``lightning`` becomes a lightning talk of
    ``venue.lightning_duration`` minutes.  Otherwise the value must be a whole
    number of minutes with an optional ``min`` suffix (``"45min"``, ``"45"``).

    Args:
        description: The proposal title, used in error messages.
        spec: The raw duration spec, or an integer minute count.
        venue: Venue configuration supplying the lightning duration.

    Returns:
        A ``(minutes, kind)`` tuple where kind is ``TALK`` or ``LIGHTNING``.

    Raises:
        InvalidDuration: If the duration cannot be parsed.
    """
    if isinstance(spec, bool):
        raise InvalidDuration(description, str(spec), "expected minutes or 'lightning'")
    if isinstance(spec, int):
        return spec, SessionKind.TALK
    if not isinstance(spec, str):
        raise InvalidDuration(description, repr(spec), "expected minutes or 'lightning'")

    if _LIGHTNING_MARKER in spec.lower():
        return venue.lightning_duration, SessionKind.LIGHTNING

    match = _MINUTES_RE.match(spec)
    if match is None:
        raise InvalidDuration(description, spec, "expected minutes or 'lightning'")
    return int(match.group("minutes")), SessionKind.TALK


def normalize_proposals(
    raw_proposals: Iterable[tuple[str, str | int]],
    venue: VenueConfig,
) -> list[SessionItem]:
    """Validate raw proposals and order them longest first.

    The first invalid proposal aborts normalization; nothing is skipped.
    Sorting is stable, so proposals of equal length keep their input order.

    Args:
        raw_proposals: ``(title, duration_spec)`` pairs in input order.
        venue: Venue configuration supplying duration bounds.

    Returns:
        Unscheduled session items sorted by descending duration.

    Raises:
        InvalidProposal: If a title is blank.
        InvalidDuration: If a duration is unparseable or out of range.
    """
    items: list[SessionItem] = []
    for sequence, (title, spec) in enumerate(raw_proposals):
        if not isinstance(title, str) or not title.strip():
            msg = f"Proposal #{sequence + 1} has a blank title"
            raise InvalidProposal(msg)
        description = title.strip()
        duration, scheduled_kind = parse_duration(description, spec, venue)
        item = SessionItem(
            description=description,
            duration=duration,
            scheduled_kind=scheduled_kind,
            sequence=sequence,
        )
        item.validate(venue)
        items.append(item)

    items.sort(key=lambda item: item.duration, reverse=True)
    logger.debug("Normalized %d proposals", len(items))
    return items
