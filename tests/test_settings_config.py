from datetime import time

import pytest
from django.test import override_settings

from django_tracks.scheduling.venue import VenueConfig
from django_tracks.settings import get_config


def test_get_config_defaults() -> None:
    with override_settings(DJANGO_TRACKS={}):
        config = get_config()
    assert config.event_name == "Conference"
    assert config.venue == VenueConfig()


def test_get_config_reads_venue_overrides() -> None:
    with override_settings(DJANGO_TRACKS={"event_name": "PyCon Test", "venue": {"morning_start": "09:30"}}):
        config = get_config()
    assert config.event_name == "PyCon Test"
    assert config.venue.morning_start == time(9, 30)
    assert config.venue.lunch_start == time(12, 0)


def test_get_config_rejects_non_mapping_root() -> None:
    with override_settings(DJANGO_TRACKS=["bad"]):
        with pytest.raises(TypeError, match="must be a mapping"):
            get_config()


def test_get_config_rejects_non_mapping_venue() -> None:
    with override_settings(DJANGO_TRACKS={"venue": ["bad"]}):
        with pytest.raises(TypeError, match=r"DJANGO_TRACKS\['venue'\] must be a mapping"):
            get_config()


def test_get_config_rejects_unknown_keys() -> None:
    with override_settings(DJANGO_TRACKS={"rooms": 4}):
        with pytest.raises(ValueError, match="unknown keys: rooms"):
            get_config()

    with override_settings(DJANGO_TRACKS={"venue": {"rooms": 4}}):
        with pytest.raises(ValueError, match=r"DJANGO_TRACKS\['venue'\] has unknown fields: rooms"):
            get_config()


def test_get_config_validates_primitive_values() -> None:
    with override_settings(DJANGO_TRACKS={"event_name": ""}):
        with pytest.raises(ValueError, match="event_name"):
            get_config()

    with override_settings(DJANGO_TRACKS={"venue": {"lunch_duration": 0}}):
        with pytest.raises(ValueError, match="lunch_duration must be a positive integer"):
            get_config()

    with override_settings(DJANGO_TRACKS={"venue": {"networking_start": "18:00"}}):
        with pytest.raises(ValueError, match="networking_end"):
            get_config()


def test_get_config_cache_clears_on_setting_changed() -> None:
    with override_settings(DJANGO_TRACKS={"event_name": "First"}):
        assert get_config().event_name == "First"

    with override_settings(DJANGO_TRACKS={"event_name": "Second"}):
        assert get_config().event_name == "Second"
