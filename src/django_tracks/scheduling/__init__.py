"""Framework-agnostic conference track scheduling engine.

Nothing in this package imports Django, so it can be used from a notebook, a
plain script, or the ``schedule_tracks`` management command alike.
"""

from django_tracks.scheduling.exceptions import (
    InvalidDuration,
    InvalidProposal,
    NetworkingWindowViolation,
    NoForwardProgress,
    SchedulingError,
)
from django_tracks.scheduling.items import SessionItem, SessionKind
from django_tracks.scheduling.normalizer import normalize_proposals, parse_duration
from django_tracks.scheduling.pool import ProposalPool, find_next
from django_tracks.scheduling.rendering import TrackRenderer, format_start_time
from django_tracks.scheduling.scheduler import ConferenceScheduler, Track, build_tracks
from django_tracks.scheduling.sources import (
    SAMPLE_PROPOSALS,
    ProposalSource,
    StaticProposalSource,
    TomlProposalSource,
)
from django_tracks.scheduling.venue import VenueConfig

__all__ = [
    "SAMPLE_PROPOSALS",
    "ConferenceScheduler",
    "InvalidDuration",
    "InvalidProposal",
    "NetworkingWindowViolation",
    "NoForwardProgress",
    "ProposalPool",
    "ProposalSource",
    "SchedulingError",
    "SessionItem",
    "SessionKind",
    "StaticProposalSource",
    "TomlProposalSource",
    "Track",
    "TrackRenderer",
    "VenueConfig",
    "build_tracks",
    "find_next",
    "format_start_time",
    "normalize_proposals",
    "parse_duration",
]
