"""Where raw proposals come from.

The scheduler only needs an ordered sequence of ``(title, duration_spec)``
pairs; a :class:`ProposalSource` is anything that can produce one.
"""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, Protocol, TypeAlias, runtime_checkable

logger = logging.getLogger(__name__)

RawProposal: TypeAlias = tuple[str, str | int]

SAMPLE_PROPOSALS: tuple[RawProposal, ...] = (
    ("Writing Fast Tests Against Enterprise Rails", "60min"),
    ("Overdoing it in Python", "45min"),
    ("Lua for the Masses", "30min"),
    ("Ruby Errors from Mismatched Gem Versions", "45min"),
    ("Common Ruby Errors", "45min"),
    ("Rails for Python Developers", "lightning"),
    ("Communicating Over Distance", "60min"),
    ("Accounting-Driven Development", "45min"),
    ("Woah", "30min"),
    ("Sit Down and Write", "30min"),
    ("Pair Programming vs Noise", "45min"),
    ("Rails Magic", "60min"),
    ("Ruby on Rails: Why We Should Move On", "60min"),
    ("Clojure Ate Scala (on my project)", "45min"),
    ("Programming in the Boondocks of Seattle", "30min"),
    ("Ruby vs. Clojure for Back-End Development", "30min"),
    ("Ruby on Rails Legacy App Maintenance", "60min"),
    ("A World Without HackerNews", "30min"),
    ("User Interface CSS in Rails Apps", "30min"),
)


@runtime_checkable
class ProposalSource(Protocol):
    """Supplies raw proposals in input order."""

    def proposals(self) -> Sequence[RawProposal]: ...


class StaticProposalSource:
    """Proposals held in memory; defaults to :data:`SAMPLE_PROPOSALS`."""

    def __init__(self, items: Iterable[RawProposal] = SAMPLE_PROPOSALS) -> None:
        self._items = [(title, spec) for title, spec in items]

    def proposals(self) -> list[RawProposal]:
        return list(self._items)


class TomlProposalSource:
    """Proposals read from a TOML file with ``[[proposals]]`` entries.

    The file is read once, on first access.  Besides the proposals it may
    carry an ``event_name`` and ``[venue]`` overrides, exposed as attributes
    for callers that layer them over their own configuration.

    Args:
        path: Filesystem path to the TOML file.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._config: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._config is None:
            # Deferred: config_loader itself imports from this package.
            from django_tracks.config_loader import load_proposals_config  # noqa: PLC0415

            self._config = load_proposals_config(self.path)
        return self._config

    @property
    def event_name(self) -> str | None:
        """The file's ``event_name``, or ``None`` when it sets none."""
        return self._load()["event_name"]

    @property
    def venue_overrides(self) -> dict[str, Any]:
        """A copy of the file's ``[venue]`` table; empty when absent."""
        return dict(self._load()["venue"])

    def proposals(self) -> list[RawProposal]:
        items = self._load()["proposals"]
        if not items:
            logger.warning("No proposals found in %s", self.path)
        return [(item["title"], item["duration"]) for item in items]
