"""Simple reporting utilities for CLI output."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

import typer

from .formatting import format_clock, format_human
from .models import RecordType, TimeRecord
from .repository import ActivityRepository

INACTIVE_TITLE = "Pause"

_PREFIXES: dict[RecordType, str] = {
    RecordType.START: "--",
    RecordType.PAUSE: "==",
    RecordType.RESET: "--",
    RecordType.CONTINUE: "--",
    RecordType.COMPLETE: "++",
    RecordType.INACTIVE: "••",
}

_LABELS: dict[RecordType, str] = {
    RecordType.START: "start",
    RecordType.PAUSE: "pause",
    RecordType.RESET: "reset",
    RecordType.CONTINUE: "continue",
    RecordType.COMPLETE: "complete",
    RecordType.INACTIVE: "inactive",
}

_CLOSING_TYPES = frozenset({RecordType.PAUSE, RecordType.RESET, RecordType.COMPLETE})


@dataclass(slots=True)
class LogLine:
    prefix: str
    title: str
    label: str
    duration: Optional[str]
    timestamp: datetime


def describe_record(record: TimeRecord) -> LogLine:
    if record.type is RecordType.INACTIVE:
        title = INACTIVE_TITLE
    else:
        title = record.activity_name
    # START and CONTINUE mark a point in time, not a measured span.
    if record.type in (RecordType.START, RecordType.CONTINUE):
        duration = None
    else:
        duration = format_human(record.duration)
    return LogLine(
        prefix=_PREFIXES[record.type],
        title=title,
        label=_LABELS[record.type],
        duration=duration,
        timestamp=datetime.fromtimestamp(record.start_time / 1000),
    )


def format_record(record: TimeRecord) -> str:
    line = describe_record(record)
    text = f"{line.prefix} {line.title} {line.prefix}"
    if line.duration:
        text = f"{text}  {line.duration}"
    return f"{line.timestamp:%Y-%m-%d %H:%M:%S}  {text}  ({line.label})"


def tracked_time_by_activity(records: Iterable[TimeRecord]) -> list[tuple[str, int]]:
    """Sum tracked milliseconds per activity name, largest first.

    Closing records report the whole run so far, so each run contributes the
    duration of its last closing record before the next START.
    """
    totals: defaultdict[str, int] = defaultdict(int)
    open_runs: dict[str, tuple[str, int]] = {}
    for record in sorted(records, key=lambda r: (r.end_time, r.start_time)):
        if record.type is RecordType.START:
            _commit(totals, open_runs.pop(record.activity_id, None))
        elif record.type in _CLOSING_TYPES:
            open_runs[record.activity_id] = (record.activity_name, record.duration)
            if record.type is not RecordType.PAUSE:
                _commit(totals, open_runs.pop(record.activity_id))
    for run in open_runs.values():
        _commit(totals, run)
    return sorted(totals.items(), key=lambda item: item[1], reverse=True)


def _commit(totals: defaultdict[str, int], run: Optional[tuple[str, int]]) -> None:
    if run is not None:
        name, duration = run
        totals[name] += duration


class SummaryPrinter:
    """Render human-readable summaries in the console."""

    def __init__(self, repository: ActivityRepository) -> None:
        self.repository = repository

    def print_logs(self, limit: Optional[int] = None) -> None:
        logs = self.repository.get_activity_logs()
        if not logs:
            typer.echo("No records yet.")
            return
        for record in logs[:limit]:
            typer.echo(format_record(record))

    def print_summary(self, recent: int = 5) -> None:
        records = self.repository.load_time_records()
        if not records:
            typer.echo("No records yet.")
            return

        inactive = sum(
            r.duration for r in records if r.type is RecordType.INACTIVE
        )
        typer.echo("Tracked time")
        typer.echo("-" * 40)
        for name, duration in tracked_time_by_activity(records):
            typer.echo(f"  {name[:28]:<28} {format_clock(duration)}")
        typer.echo()
        typer.echo(f"Inactive time: {format_human(inactive)}")

        typer.echo()
        typer.echo("Latest entries:")
        for record in self.repository.get_activity_logs()[:recent]:
            typer.echo(f"  {format_record(record)}")
