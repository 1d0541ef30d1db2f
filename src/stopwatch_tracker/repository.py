"""JSON file storage for activities, time records and settings.

Every store is a pretty-printed JSON document in the data directory. Reads
and writes never raise: failures are logged and replaced by an empty list or
default settings so the stopwatch keeps working with a broken data file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from pydantic import TypeAdapter

from .models import Activity, AppSettings, RecordType, TimeRecord
from .paths import resolve_store_paths

logger = logging.getLogger(__name__)

_ACTIVITY_LIST = TypeAdapter(list[Activity])
_RECORD_LIST = TypeAdapter(list[TimeRecord])


class ActivityRepository:
    """Load and save the stopwatch's persistent state."""

    def __init__(self, data_dir: Optional[Path] = None) -> None:
        paths = resolve_store_paths(data_dir)
        self.data_dir = paths.data_dir
        self.activities_path = paths.activities
        self.time_records_path = paths.time_records
        self.settings_path = paths.settings

    # --- Activities ---
    def load_activities(self) -> list[Activity]:
        return self._load_list(self.activities_path, _ACTIVITY_LIST, "activities")

    def save_activities(self, activities: Sequence[Activity]) -> None:
        self._write(
            self.activities_path,
            _ACTIVITY_LIST.dump_json(list(activities), indent=2, by_alias=True),
            "activities",
        )

    def find_activity(self, activity_id: str) -> Optional[Activity]:
        for activity in self.load_activities():
            if activity.id == activity_id:
                return activity
        return None

    def upsert_activity(self, activity: Activity) -> None:
        """Replace the activity with the same id, or append it."""
        activities = self.load_activities()
        for index, existing in enumerate(activities):
            if existing.id == activity.id:
                activities[index] = activity
                break
        else:
            activities.append(activity)
        self.save_activities(activities)

    def delete_activity(self, activity_id: str) -> bool:
        activities = self.load_activities()
        remaining = [a for a in activities if a.id != activity_id]
        if len(remaining) == len(activities):
            return False
        self.save_activities(remaining)
        return True

    # --- Time records ---
    def load_time_records(self) -> list[TimeRecord]:
        return self._load_list(self.time_records_path, _RECORD_LIST, "time records")

    def save_time_records(self, records: Sequence[TimeRecord]) -> None:
        self._write(
            self.time_records_path,
            _RECORD_LIST.dump_json(list(records), indent=2, by_alias=True),
            "time records",
        )

    def add_time_record(self, record: TimeRecord) -> None:
        records = self.load_time_records()
        records.append(record)
        self.save_time_records(records)
        logger.debug("Recorded %s for %s.", record.type.value, record.activity_name)

    def get_activity_logs(self) -> list[TimeRecord]:
        """Return all records, newest ``start_time`` first.

        Records sharing a start time keep the most recently appended first.
        """
        indexed = list(enumerate(self.load_time_records()))
        indexed.sort(key=lambda item: (item[1].start_time, item[0]), reverse=True)
        return [record for _, record in indexed]

    def get_inactive_time_records(self) -> list[TimeRecord]:
        return [r for r in self.load_time_records() if r.type is RecordType.INACTIVE]

    def clear_logs(self) -> None:
        try:
            self.time_records_path.unlink(missing_ok=True)
        except OSError:
            logger.exception("Failed to clear logs at %s", self.time_records_path)

    # --- Settings ---
    def load_settings(self) -> AppSettings:
        if not self.settings_path.exists():
            return AppSettings.default()
        try:
            return AppSettings.model_validate_json(
                self.settings_path.read_text(encoding="utf-8")
            )
        except (OSError, ValueError):
            logger.exception("Failed to load settings from %s", self.settings_path)
            return AppSettings.default()

    def save_settings(self, settings: AppSettings) -> None:
        self._write(
            self.settings_path,
            settings.model_dump_json(indent=2, by_alias=True).encode("utf-8"),
            "settings",
        )

    # --- Helpers ---
    def _load_list(self, path: Path, adapter: TypeAdapter, label: str) -> list:
        if not path.exists():
            return []
        try:
            return adapter.validate_json(path.read_bytes())
        except (OSError, ValueError):
            logger.exception("Failed to load %s from %s", label, path)
            return []

    def _write(self, path: Path, payload: bytes, label: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(payload)
        except OSError:
            logger.exception("Failed to save %s to %s", label, path)
