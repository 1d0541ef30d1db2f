"""Configuration models and helpers for the stopwatch."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from .models import DEFAULT_MAIN_WINDOW_SIZE, DEFAULT_SETTINGS_WINDOW_SIZE

DIMENSION_ERROR = "Enter numeric values"


@dataclass(slots=True)
class EngineSettings:
    """Runtime configuration for the stopwatch engine."""

    tick_interval: timedelta = timedelta(milliseconds=10)
    inactive_threshold: timedelta = timedelta(milliseconds=1000)

    @classmethod
    def from_milliseconds(
        cls,
        tick_ms: float,
        inactive_threshold_ms: float | None = None,
    ) -> "EngineSettings":
        settings = cls(tick_interval=timedelta(milliseconds=tick_ms))
        if inactive_threshold_ms is not None:
            settings.inactive_threshold = timedelta(milliseconds=inactive_threshold_ms)
        return settings

    @property
    def tick_seconds(self) -> float:
        return self.tick_interval.total_seconds()

    @property
    def inactive_threshold_ms(self) -> int:
        return int(self.inactive_threshold.total_seconds() * 1000)


def parse_dimension(value: Optional[str], default: int) -> int:
    """Parse a window dimension typed by the user, falling back to ``default``."""
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def dimension_error(width: Optional[str], height: Optional[str]) -> Optional[str]:
    """Return the inline validation message for a width/height pair, if any."""
    for value in (width, height):
        if value is None:
            continue
        try:
            int(value.strip())
        except ValueError:
            return DIMENSION_ERROR
    return None


def window_defaults() -> dict[str, int]:
    return {
        "main_window_width": DEFAULT_MAIN_WINDOW_SIZE[0],
        "main_window_height": DEFAULT_MAIN_WINDOW_SIZE[1],
        "settings_window_width": DEFAULT_SETTINGS_WINDOW_SIZE[0],
        "settings_window_height": DEFAULT_SETTINGS_WINDOW_SIZE[1],
    }
