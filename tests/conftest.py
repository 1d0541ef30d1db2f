"""Shared fixtures: a hand-driven clock, a manual ticker and a temporary repository."""

from __future__ import annotations

from typing import Callable

import pytest

from stopwatch_tracker.engine import StopwatchEngine
from stopwatch_tracker.models import Activity, AppSettings
from stopwatch_tracker.repository import ActivityRepository


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now_ms: int = 1_700_000_000_000) -> None:
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> None:
        self.now_ms += ms


class ManualTicker:
    """Ticker stand-in that records its lifecycle instead of spawning a thread."""

    instances: list["ManualTicker"] = []

    def __init__(self, interval: float, callback: Callable[[], None]) -> None:
        self.interval = interval
        self.callback = callback
        self.started = False
        self.cancel_count = 0
        ManualTicker.instances.append(self)

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancel_count += 1

    def fire(self) -> None:
        self.callback()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def tickers() -> list[ManualTicker]:
    ManualTicker.instances = []
    return ManualTicker.instances


@pytest.fixture
def repository(tmp_path) -> ActivityRepository:
    return ActivityRepository(tmp_path)


@pytest.fixture
def activities(repository: ActivityRepository) -> tuple[Activity, Activity]:
    coding = Activity(id="a1", name="Coding", color="#4CAF50")
    reading = Activity(id="b2", name="Reading", color="#2196F3")
    repository.save_activities([coding, reading])
    repository.save_settings(AppSettings(is_activity_tracking_enabled=True))
    return coding, reading


@pytest.fixture
def engine(repository, clock, tickers) -> StopwatchEngine:
    return StopwatchEngine(repository, clock=clock, ticker_factory=ManualTicker)
