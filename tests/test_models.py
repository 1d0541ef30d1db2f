"""Models, JSON aliases and id generation."""

import json

from stopwatch_tracker.models import (
    Activity,
    AppSettings,
    RecordType,
    TimeRecord,
    generate_id,
)


def test_generate_id_is_unique_within_the_same_millisecond():
    ids = [generate_id() for _ in range(50)]
    assert len(set(ids)) == len(ids)
    assert ids[0].split("-")[0].isdigit()


def test_activity_create_generates_id_and_defaults_active():
    activity = Activity.create("Coding", "#4CAF50")
    assert activity.id
    assert activity.is_active is True


def test_time_record_uses_camel_case_on_the_wire():
    record = TimeRecord(
        id="1",
        activity_id="a1",
        activity_name="Coding",
        start_time=10,
        end_time=20,
        duration=10,
        type=RecordType.PAUSE,
    )
    payload = json.loads(record.model_dump_json(by_alias=True))
    assert payload == {
        "id": "1",
        "activityId": "a1",
        "activityName": "Coding",
        "startTime": 10,
        "endTime": 20,
        "duration": 10,
        "type": "PAUSE",
    }
    assert TimeRecord.model_validate(payload) == record


def test_settings_default_values():
    settings = AppSettings.default()
    assert settings.is_activity_tracking_enabled is False
    assert settings.show_logs_in_main_screen is True
    assert (settings.main_window_width, settings.main_window_height) == (400, 140)
    assert (settings.settings_window_width, settings.settings_window_height) == (500, 500)


def test_settings_fill_missing_keys_with_defaults():
    settings = AppSettings.model_validate_json('{"isActivityTrackingEnabled": true}')
    assert settings.is_activity_tracking_enabled is True
    assert settings.main_window_width == 400
