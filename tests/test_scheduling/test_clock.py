"""Tests for django_tracks.scheduling.clock -- minute arithmetic and 12-hour rendering."""

from datetime import time

import pytest

from django_tracks.scheduling.clock import (
    add_minutes,
    format_12_hour,
    from_minutes,
    minutes_between,
    parse_time,
    to_minutes,
)


class TestMinuteArithmetic:
    @pytest.mark.unit
    def test_to_minutes(self):
        assert to_minutes(time(0, 0)) == 0
        assert to_minutes(time(9, 30)) == 570

    @pytest.mark.unit
    def test_from_minutes(self):
        assert from_minutes(570) == time(9, 30)

    @pytest.mark.unit
    def test_from_minutes_rejects_values_outside_a_day(self):
        with pytest.raises(ValueError, match="outside a single day"):
            from_minutes(24 * 60)
        with pytest.raises(ValueError, match="outside a single day"):
            from_minutes(-1)

    @pytest.mark.unit
    def test_add_minutes_crosses_the_hour(self):
        assert add_minutes(time(11, 45), 30) == time(12, 15)

    @pytest.mark.unit
    def test_minutes_between_can_be_negative(self):
        assert minutes_between(time(13, 0), time(16, 0)) == 180
        assert minutes_between(time(16, 35), time(16, 0)) == -35


class TestParseTime:
    @pytest.mark.unit
    def test_passes_time_through(self):
        assert parse_time(time(9, 0)) == time(9, 0)

    @pytest.mark.unit
    def test_parses_hh_mm_string(self):
        assert parse_time("09:30") == time(9, 30)
        assert parse_time(" 17:00 ") == time(17, 0)

    @pytest.mark.unit
    def test_rejects_garbage(self):
        with pytest.raises(ValueError, match="Invalid time of day"):
            parse_time("noon")

    @pytest.mark.unit
    def test_rejects_other_types(self):
        with pytest.raises(TypeError, match="got int"):
            parse_time(900)


class TestFormat12Hour:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (time(9, 0), "09:00 AM"),
            (time(11, 5), "11:05 AM"),
            (time(12, 0), "12:00 PM"),
            (time(13, 0), "01:00 PM"),
            (time(16, 35), "04:35 PM"),
            (time(0, 30), "12:30 AM"),
        ],
    )
    def test_format(self, value, expected):
        assert format_12_hour(value) == expected
