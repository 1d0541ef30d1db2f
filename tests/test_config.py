"""Engine settings and window-dimension validation."""

from datetime import timedelta

from stopwatch_tracker.config import (
    DIMENSION_ERROR,
    EngineSettings,
    dimension_error,
    parse_dimension,
)


def test_engine_defaults():
    settings = EngineSettings()
    assert settings.tick_interval == timedelta(milliseconds=10)
    assert settings.inactive_threshold_ms == 1000


def test_from_milliseconds():
    settings = EngineSettings.from_milliseconds(50, inactive_threshold_ms=2500)
    assert settings.tick_seconds == 0.05
    assert settings.inactive_threshold_ms == 2500


def test_parse_dimension_accepts_numbers():
    assert parse_dimension(" 640 ", 400) == 640


def test_parse_dimension_falls_back_on_garbage():
    assert parse_dimension("wide", 400) == 400
    assert parse_dimension(None, 140) == 140


def test_dimension_error_reports_non_numeric_values():
    assert dimension_error("640", "480") is None
    assert dimension_error("640", None) is None
    assert dimension_error("640", "tall") == DIMENSION_ERROR


def test_from_milliseconds_keeps_default_threshold():
    settings = EngineSettings.from_milliseconds(50)
    assert settings.inactive_threshold == EngineSettings().inactive_threshold
