"""Log-line rendering and per-activity summaries."""

from stopwatch_tracker.models import RecordType, TimeRecord
from stopwatch_tracker.reporting import (
    SummaryPrinter,
    describe_record,
    format_record,
    tracked_time_by_activity,
)


def rec(record_type, start, end, duration, activity_id="a1", name="Coding"):
    return TimeRecord(
        id=f"{record_type.value}-{end}",
        activity_id=activity_id,
        activity_name=name,
        start_time=start,
        end_time=end,
        duration=duration,
        type=record_type,
    )


def test_describe_pause_includes_duration():
    line = describe_record(rec(RecordType.PAUSE, 0, 61_000, 61_000))
    assert (line.prefix, line.title, line.label) == ("==", "Coding", "pause")
    assert line.duration == "1 min 1 sec"


def test_describe_start_has_no_duration():
    line = describe_record(rec(RecordType.START, 0, 0, 0))
    assert line.duration is None
    assert line.label == "start"


def test_describe_inactive_uses_pause_title():
    line = describe_record(rec(RecordType.INACTIVE, 0, 5000, 5000))
    assert (line.prefix, line.title, line.label) == ("••", "Pause", "inactive")


def test_format_record_single_line():
    text = format_record(rec(RecordType.COMPLETE, 0, 3_661_000, 3_661_000))
    assert text.endswith("++ Coding ++  1 h 1 min 1 sec  (complete)")


def test_tracked_time_uses_last_closing_record_per_run():
    records = [
        rec(RecordType.START, 0, 0, 0),
        rec(RecordType.PAUSE, 0, 1000, 1000),
        rec(RecordType.CONTINUE, 5000, 5000, 1000),
        rec(RecordType.PAUSE, 4000, 7000, 3000),
        rec(RecordType.START, 8000, 8000, 0, "b2", "Reading"),
        rec(RecordType.RESET, 8000, 10_000, 2000, "b2", "Reading"),
        rec(RecordType.START, 10_000, 10_000, 0, "b2", "Reading"),
        rec(RecordType.COMPLETE, 10_000, 10_500, 500, "b2", "Reading"),
        rec(RecordType.INACTIVE, 1000, 5000, 4000),
    ]
    assert tracked_time_by_activity(records) == [("Coding", 3000), ("Reading", 2500)]


def test_tracked_time_ignores_repeated_pause():
    records = [
        rec(RecordType.START, 0, 0, 0),
        rec(RecordType.PAUSE, 0, 500, 500),
        rec(RecordType.PAUSE, 0, 3500, 500),
    ]
    assert tracked_time_by_activity(records) == [("Coding", 500)]


def test_summary_printer_without_records(repository, capsys):
    SummaryPrinter(repository).print_summary()
    assert "No records yet." in capsys.readouterr().out


def test_summary_printer_totals(repository, capsys):
    repository.save_time_records(
        [
            rec(RecordType.START, 0, 0, 0),
            rec(RecordType.PAUSE, 0, 90_000, 90_000),
            rec(RecordType.INACTIVE, 90_000, 120_000, 30_000),
        ]
    )
    SummaryPrinter(repository).print_summary()
    out = capsys.readouterr().out
    assert "Coding" in out
    assert "00:01:30" in out
    assert "Inactive time: 30 sec" in out


def test_print_logs_respects_limit(repository, capsys):
    repository.save_time_records(
        [rec(RecordType.START, 0, 0, 0), rec(RecordType.START, 10, 10, 0)]
    )
    SummaryPrinter(repository).print_logs(limit=1)
    assert len(capsys.readouterr().out.strip().splitlines()) == 1
