"""Clock and human-readable duration formatting."""

import pytest

from stopwatch_tracker.formatting import format_clock, format_human


class TestFormatClock:
    def test_zero(self):
        assert format_clock(0) == "00:00:00"

    def test_hours_minutes_seconds(self):
        assert format_clock(3_661_000) == "01:01:01"

    def test_truncates_milliseconds(self):
        assert format_clock(59_999) == "00:00:59"

    def test_hours_are_not_wrapped(self):
        assert format_clock(100 * 3_600_000) == "100:00:00"

    @pytest.mark.parametrize("ms", [0, 999, 61_001, 3_599_999, 86_400_000, 123_456_789])
    def test_matches_printf_layout(self, ms):
        expected = "%02d:%02d:%02d" % (ms // 3_600_000, (ms // 60_000) % 60, (ms // 1000) % 60)
        assert format_clock(ms) == expected

    def test_negative_is_clamped(self):
        assert format_clock(-5000) == "00:00:00"


class TestFormatHuman:
    def test_seconds_only(self):
        assert format_human(0) == "0 sec"
        assert format_human(42_500) == "42 sec"

    def test_minutes_tier(self):
        assert format_human(61_000) == "1 min 1 sec"
        assert format_human(120_000) == "2 min 0 sec"

    def test_hours_tier(self):
        assert format_human(3_661_000) == "1 h 1 min 1 sec"
        assert format_human(3_600_000) == "1 h 0 min 0 sec"
