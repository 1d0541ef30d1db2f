"""Domain models for activities, time records and settings."""

from __future__ import annotations

import threading
import time
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class _IdGenerator:
    """Millisecond-timestamp ids with a counter suffix for same-millisecond calls."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last_ms = -1
        self._repeat = 0

    def __call__(self) -> str:
        now_ms = int(time.time() * 1000)
        with self._lock:
            if now_ms == self._last_ms:
                self._repeat += 1
                return f"{now_ms}-{self._repeat}"
            self._last_ms = now_ms
            self._repeat = 0
            return str(now_ms)


generate_id = _IdGenerator()


class RecordType(str, Enum):
    START = "START"
    PAUSE = "PAUSE"
    RESET = "RESET"
    CONTINUE = "CONTINUE"
    COMPLETE = "COMPLETE"
    INACTIVE = "INACTIVE"


class Activity(BaseModel):
    """A named, colored task the stopwatch can attribute time to."""

    id: str
    name: str
    color: str
    is_active: bool = Field(default=True, alias="isActive")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def create(cls, name: str, color: str) -> "Activity":
        return cls(id=generate_id(), name=name, color=color)


class TimeRecord(BaseModel):
    """A single stopwatch event in the append-only history.

    ``activity_name`` is a snapshot taken when the record was created so the
    history stays readable after an activity is renamed or deleted.
    """

    id: str
    activity_id: str = Field(alias="activityId")
    activity_name: str = Field(alias="activityName")
    start_time: int = Field(alias="startTime")
    end_time: int = Field(alias="endTime")
    duration: int
    type: RecordType

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


DEFAULT_MAIN_WINDOW_SIZE = (400, 140)
DEFAULT_SETTINGS_WINDOW_SIZE = (500, 500)


class AppSettings(BaseModel):
    """User preferences persisted between sessions."""

    is_activity_tracking_enabled: bool = Field(
        default=False, alias="isActivityTrackingEnabled"
    )
    show_logs_in_main_screen: bool = Field(default=True, alias="showLogsInMainScreen")
    main_window_width: int = Field(
        default=DEFAULT_MAIN_WINDOW_SIZE[0], alias="mainWindowWidth"
    )
    main_window_height: int = Field(
        default=DEFAULT_MAIN_WINDOW_SIZE[1], alias="mainWindowHeight"
    )
    settings_window_width: int = Field(
        default=DEFAULT_SETTINGS_WINDOW_SIZE[0], alias="settingsWindowWidth"
    )
    settings_window_height: int = Field(
        default=DEFAULT_SETTINGS_WINDOW_SIZE[1], alias="settingsWindowHeight"
    )

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def default(cls) -> "AppSettings":
        return cls()
