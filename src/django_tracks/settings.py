"""Typed configuration for django-tracks.

Reads a single ``DJANGO_TRACKS`` dict from Django settings and exposes it as a
frozen dataclass with sensible defaults.

Usage::

    from django_tracks.settings import get_config

    config = get_config()
    config.event_name
    config.venue.lunch_start

Example settings::

    DJANGO_TRACKS = {
        "event_name": "PyCon Test",
        "venue": {"morning_start": "09:30", "networking_end": "17:30"},
    }
"""

import functools
from collections.abc import Mapping
from dataclasses import dataclass, field

from django.conf import settings
from django.test.signals import setting_changed

from django_tracks.scheduling.venue import VenueConfig


@dataclass(frozen=True, slots=True)
class TracksConfig:
    """Top-level django-tracks configuration."""

    venue: VenueConfig = field(default_factory=VenueConfig)
    event_name: str = "Conference"


@functools.lru_cache(maxsize=1)
def get_config() -> TracksConfig:
    """Build and return the track scheduling configuration.

    Reads ``settings.DJANGO_TRACKS`` (a plain dict) and returns a frozen
    :class:`TracksConfig`.  The result is cached; the cache is cleared
    automatically when Django's ``setting_changed`` signal fires (e.g. inside
    ``override_settings``).
    """
    raw = getattr(settings, "DJANGO_TRACKS", {})
    if not isinstance(raw, Mapping):
        msg = "DJANGO_TRACKS must be a mapping (dict-like object)"
        raise TypeError(msg)
    raw_data = dict(raw)

    venue_data = raw_data.pop("venue", {})
    if not isinstance(venue_data, Mapping):
        msg = "DJANGO_TRACKS['venue'] must be a mapping (dict-like object)"
        raise TypeError(msg)
    unknown = set(raw_data) - {"event_name"}
    if unknown:
        msg = f"DJANGO_TRACKS has unknown keys: {', '.join(sorted(unknown))}"
        raise ValueError(msg)

    config = TracksConfig(
        venue=VenueConfig.from_mapping(venue_data, "DJANGO_TRACKS['venue']"),
        **raw_data,
    )
    _validate_tracks_config(config)
    return config


def _validate_tracks_config(config: TracksConfig) -> None:
    """Validate high-impact configuration values with clear error messages."""
    if not isinstance(config.event_name, str) or not config.event_name.strip():
        msg = "DJANGO_TRACKS['event_name'] must be a non-empty string"
        raise ValueError(msg)


def _clear_config_cache(*, setting: str, **kwargs: object) -> None:  # noqa: ARG001
    """Clear the cached config when Django settings change during tests."""
    if setting == "DJANGO_TRACKS":
        get_config.cache_clear()


setting_changed.connect(_clear_config_cache, dispatch_uid="django_tracks.settings.clear_config_cache")
