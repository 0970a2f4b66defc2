"""TOML loader for talk proposal files.

A proposal file lists the talks to schedule and may override the venue
windows::

    event_name = "PyCon Test"

    [venue]
    morning_start = 09:00:00
    networking_end = 17:00:00

    [[proposals]]
    title = "Writing Fast Tests Against Enterprise Rails"
    duration = "60min"

    [[proposals]]
    title = "Rails for Python Developers"
    duration = "lightning"
"""

import tomllib
from pathlib import Path
from typing import Any

from django_tracks.scheduling.venue import VenueConfig

_REQUIRED_PROPOSAL_FIELDS: set[str] = {"title", "duration"}


def _validate_mapping(mapping: object, required: set[str], label: str) -> None:
    """Validate that *mapping* is a dict containing all *required* keys.

    Args:
        mapping: The value to validate.
        required: Set of required key names.
        label: Human-readable context for error messages.

    Raises:
        TypeError: If *mapping* is not a dict.
        ValueError: If *mapping* is missing required keys.
    """
    if not isinstance(mapping, dict):
        msg = f"{label} must be a mapping, got {type(mapping).__name__}"
        raise TypeError(msg)
    missing = required - mapping.keys()
    if missing:
        msg = f"{label} is missing required fields: {', '.join(sorted(missing))}"
        raise ValueError(msg)


def _validate_proposals(items: object) -> list[dict[str, Any]]:
    """Validate the ``[[proposals]]`` array of tables.

    Titles must be non-empty strings; durations must be strings
    (``"45min"``, ``"lightning"``) or integers.  Range checks are left to the
    scheduling engine.
    """
    if not isinstance(items, list):
        msg = "proposals must be a list of tables"
        raise ValueError(msg)

    for idx, item in enumerate(items):
        label = f"proposals[{idx}]"
        _validate_mapping(item, _REQUIRED_PROPOSAL_FIELDS, label)
        title = item["title"]
        if not isinstance(title, str) or not title.strip():
            msg = f"{label}.title must be a non-empty string"
            raise ValueError(msg)
        duration = item["duration"]
        if isinstance(duration, bool) or not isinstance(duration, (str, int)):
            msg = f"{label}.duration must be a string or an integer"
            raise ValueError(msg)
    return items


def load_proposals_config(path: str | Path) -> dict[str, Any]:
    """Load and validate a TOML proposal file.

    Args:
        path: Filesystem path to the TOML file.

    Returns:
        A mapping with ``proposals`` (list of ``{"title", "duration"}``
        dicts, in file order), ``venue`` (the raw override table, empty when
        absent) and ``event_name`` (``None`` when absent).

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If the file is not valid TOML, or proposals or venue
            overrides are malformed.
        TypeError: If a table has the wrong shape.
    """
    path = Path(path)
    if not path.exists():
        msg = f"Proposals file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open("rb") as fh:
        try:
            data: dict[str, Any] = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {path}: {exc}"
            raise ValueError(msg) from exc

    if "proposals" not in data:
        msg = "Missing required [[proposals]] array in proposals file"
        raise ValueError(msg)

    proposals = _validate_proposals(data["proposals"])

    venue = data.get("venue", {})
    # Fail on bad overrides now, while the file path is still in context.
    VenueConfig.from_mapping(venue, "venue")

    event_name = data.get("event_name")
    if event_name is not None and (not isinstance(event_name, str) or not event_name.strip()):
        msg = "event_name must be a non-empty string"
        raise ValueError(msg)

    return {"event_name": event_name, "proposals": proposals, "venue": venue}
