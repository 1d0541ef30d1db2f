"""Stopwatch state machine with optional per-activity time tracking."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from .config import EngineSettings
from .models import Activity, AppSettings, RecordType, TimeRecord, generate_id
from .repository import ActivityRepository
from .ticker import Ticker

logger = logging.getLogger(__name__)

UNKNOWN_ACTIVITY = "Unknown"

Clock = Callable[[], int]


class TickerHandle(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TickerFactory = Callable[[float, Callable[[], None]], TickerHandle]


def wall_clock_ms() -> int:
    return int(time.time() * 1000)


@dataclass(slots=True)
class EngineState:
    """Transient timer state; never persisted."""

    is_running: bool = False
    display_time: int = 0
    accumulated_time: int = 0
    start_timestamp: int = 0
    selected_activity_id: Optional[str] = None
    last_pause_start: Optional[int] = None
    # Id of the START/CONTINUE record not yet closed by PAUSE, RESET or COMPLETE.
    pending_record_id: Optional[str] = None
    inactive_time: int = 0


class StopwatchEngine:
    """Runs the stopwatch and records its history through the repository.

    The engine is safe to drive from a UI thread while its ticker refreshes
    ``display_time`` on a background thread; every state change happens
    under a single lock.
    """

    def __init__(
        self,
        repository: ActivityRepository,
        settings: Optional[EngineSettings] = None,
        *,
        clock: Clock = wall_clock_ms,
        ticker_factory: TickerFactory = Ticker,
    ) -> None:
        self.repository = repository
        self.settings = settings or EngineSettings()
        self._clock = clock
        self._ticker_factory = ticker_factory
        self._ticker: Optional[TickerHandle] = None
        self._lock = threading.Lock()
        self._state = EngineState()
        self._app_settings = repository.load_settings()
        self._state.inactive_time = sum(
            record.duration for record in repository.get_inactive_time_records()
        )

    # --- Read-only views ---
    @property
    def is_running(self) -> bool:
        return self._state.is_running

    @property
    def display_time(self) -> int:
        return self._state.display_time

    @property
    def accumulated_time(self) -> int:
        return self._state.accumulated_time

    @property
    def selected_activity_id(self) -> Optional[str]:
        return self._state.selected_activity_id

    @property
    def selected_activity(self) -> Optional[Activity]:
        activity_id = self._state.selected_activity_id
        if activity_id is None:
            return None
        return self.repository.find_activity(activity_id)

    @property
    def inactive_time(self) -> int:
        return self._state.inactive_time

    @property
    def app_settings(self) -> AppSettings:
        return self._app_settings

    @property
    def is_activity_tracking_enabled(self) -> bool:
        return self._app_settings.is_activity_tracking_enabled

    @property
    def activity_logs(self) -> list[TimeRecord]:
        return self.repository.get_activity_logs()

    # --- Operations ---
    def start(self) -> None:
        with self._lock:
            state = self._state
            if state.is_running:
                return
            now = self._clock()
            state.is_running = True
            state.start_timestamp = now - state.accumulated_time

            if state.last_pause_start is not None:
                gap = now - state.last_pause_start
                if gap > self.settings.inactive_threshold_ms:
                    if self._emit(RecordType.INACTIVE, state.last_pause_start, now, gap):
                        state.inactive_time += gap
                state.last_pause_start = None

            # Resumed and never-started runs are told apart only by accumulated time.
            if state.accumulated_time > 0:
                record = self._emit(
                    RecordType.CONTINUE, now, now, state.accumulated_time
                )
            else:
                record = self._emit(RecordType.START, now, now, 0)
            if record is not None:
                state.pending_record_id = record.id

            self._ticker = self._ticker_factory(self.settings.tick_seconds, self.tick)
            self._ticker.start()
            logger.debug("Stopwatch started at %d ms.", state.accumulated_time)

    def pause(self) -> None:
        with self._lock:
            state = self._state
            now = self._clock()
            if state.is_running:
                state.display_time = now - state.start_timestamp
                state.is_running = False
            self._cancel_ticker()
            state.accumulated_time = state.display_time
            state.last_pause_start = now

            # A repeated pause is still recorded and moves the inactivity anchor.
            self._emit(RecordType.PAUSE, state.start_timestamp, now, state.display_time)
            state.pending_record_id = None
            logger.debug("Stopwatch paused at %d ms.", state.accumulated_time)

    def reset(self) -> None:
        with self._lock:
            state = self._state
            if state.is_running:
                self._lap_reset()
                return
            self._cancel_ticker()
            state.accumulated_time = 0
            state.display_time = 0
            state.pending_record_id = None
            state.last_pause_start = None
            logger.debug("Stopwatch reset.")

    def set_selected_activity(self, activity_id: Optional[str]) -> None:
        with self._lock:
            state = self._state
            previous = state.selected_activity_id
            if not state.is_running or previous == activity_id:
                state.selected_activity_id = activity_id
                return

            now = self._clock()
            state.display_time = now - state.start_timestamp
            if previous is not None:
                self._emit(
                    RecordType.COMPLETE, state.start_timestamp, now, state.display_time
                )
            state.pending_record_id = None
            state.selected_activity_id = activity_id
            state.accumulated_time = 0
            state.display_time = 0
            state.start_timestamp = now
            record = self._emit(RecordType.START, now, now, 0)
            if record is not None:
                state.pending_record_id = record.id
            logger.debug("Switched activity from %s to %s.", previous, activity_id)

    def clear_logs(self) -> None:
        with self._lock:
            self.repository.clear_logs()
            self._state.inactive_time = 0
            logger.info("Activity logs cleared.")

    def set_activity_tracking_enabled(self, enabled: bool) -> None:
        with self._lock:
            self._app_settings = self._app_settings.model_copy(
                update={"is_activity_tracking_enabled": enabled}
            )
            self.repository.save_settings(self._app_settings)
            if not enabled:
                self._state.selected_activity_id = None
                self._state.pending_record_id = None
            logger.debug("Activity tracking enabled=%s.", enabled)

    def tick(self) -> None:
        """Refresh ``display_time`` from the clock while running."""
        with self._lock:
            state = self._state
            if state.is_running:
                state.display_time = self._clock() - state.start_timestamp

    # --- Internals ---
    def _lap_reset(self) -> None:
        state = self._state
        now = self._clock()
        reset_duration = now - state.start_timestamp
        run_start = state.start_timestamp
        state.accumulated_time = 0
        state.display_time = 0
        state.start_timestamp = now

        self._emit(RecordType.RESET, run_start, now, reset_duration)
        record = self._emit(RecordType.START, now, now, 0)
        state.pending_record_id = record.id if record is not None else None
        logger.debug("Lap reset after %d ms.", reset_duration)

    def _cancel_ticker(self) -> None:
        if self._ticker is not None:
            self._ticker.cancel()
            self._ticker = None

    def _emit(
        self,
        record_type: RecordType,
        start_time: int,
        end_time: int,
        duration: int,
    ) -> Optional[TimeRecord]:
        """Append a record for the selected activity; returns ``None`` if none is selected."""
        activity_id = self._state.selected_activity_id
        if activity_id is None:
            return None
        activity = self.repository.find_activity(activity_id)
        record = TimeRecord(
            id=generate_id(),
            activity_id=activity_id,
            activity_name=activity.name if activity else UNKNOWN_ACTIVITY,
            start_time=start_time,
            end_time=end_time,
            duration=duration,
            type=record_type,
        )
        self.repository.add_time_record(record)
        return record
