"""Helpers for locating the stopwatch's data files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from platformdirs import PlatformDirs


APP_NAME = "StopwatchTracker"
APP_AUTHOR = "StopwatchTracker"


@dataclass(frozen=True, slots=True)
class StorePaths:
    """One JSON file per persisted concern, all inside ``data_dir``."""

    data_dir: Path

    @property
    def activities(self) -> Path:
        return self.data_dir / "activities.json"

    @property
    def time_records(self) -> Path:
        return self.data_dir / "time_records.json"

    @property
    def settings(self) -> Path:
        return self.data_dir / "app_settings.json"


def get_data_dir() -> Path:
    """Return the per-user directory for persistent data, creating it if needed."""
    dirs = PlatformDirs(appname=APP_NAME, appauthor=APP_AUTHOR, roaming=True)
    path = Path(dirs.user_data_path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def resolve_store_paths(data_dir: Optional[Path] = None) -> StorePaths:
    return StorePaths(Path(data_dir) if data_dir is not None else get_data_dir())
