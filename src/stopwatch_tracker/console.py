"""Line-oriented console front end for the stopwatch engine."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

import typer

from .engine import StopwatchEngine
from .formatting import format_clock, format_human
from .reporting import format_record

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Commands:
  start              start or resume the stopwatch
  pause              pause the stopwatch
  reset              lap reset while running, full reset while paused
  select ID          attribute time to an activity
  deselect           stop attributing time to an activity
  tracking on|off    enable or disable activity tracking
  status             show the current time
  logs               show the activity log
  clear              delete the activity log
  help               show this help
  quit               pause if running and exit"""


class StopwatchConsole:
    """Dispatch typed commands to a :class:`StopwatchEngine`."""

    def __init__(
        self,
        engine: StopwatchEngine,
        echo: Callable[[str], None] = typer.echo,
    ) -> None:
        self.engine = engine
        self.echo = echo
        self._commands: dict[str, Callable[[list[str]], None]] = {
            "start": self._start,
            "pause": self._pause,
            "reset": self._reset,
            "select": self._select,
            "deselect": self._deselect,
            "tracking": self._tracking,
            "status": self._status,
            "logs": self._logs,
            "clear": self._clear,
            "help": self._help,
        }

    def run(self, lines: Iterable[str]) -> None:
        """Process commands until ``quit`` or the input is exhausted."""
        self._status([])
        for line in lines:
            if not self.handle(line):
                break
        self.shutdown()

    def handle(self, line: str) -> bool:
        """Execute one command line; returns ``False`` when the session should end."""
        parts = line.split()
        if not parts:
            return True
        name, args = parts[0].lower(), parts[1:]
        logger.debug("Console command %s %s", name, args)
        if name in ("quit", "exit"):
            return False
        command = self._commands.get(name)
        if command is None:
            self.echo(f"Unknown command: {name}. Type 'help' for a list.")
            return True
        command(args)
        return True

    def shutdown(self) -> None:
        if self.engine.is_running:
            self.engine.pause()
        self._status([])

    def status_line(self) -> str:
        engine = self.engine
        state = "running" if engine.is_running else "paused" if engine.display_time else "stopped"
        line = f"{format_clock(engine.display_time)} [{state}]"
        activity = engine.selected_activity
        if activity is not None:
            line = f"{line} {activity.name}"
        elif engine.selected_activity_id is not None:
            line = f"{line} {engine.selected_activity_id}"
        return line

    def _start(self, args: list[str]) -> None:
        self.engine.start()
        self._report()

    def _pause(self, args: list[str]) -> None:
        self.engine.pause()
        self._report()

    def _reset(self, args: list[str]) -> None:
        self.engine.reset()
        self._report()

    def _report(self) -> None:
        self.echo(self.status_line())
        if not self.engine.app_settings.show_logs_in_main_screen:
            return
        if self.engine.selected_activity_id is None:
            return
        records = self.engine.repository.load_time_records()
        if records:
            self.echo(f"  {format_record(records[-1])}")

    def _select(self, args: list[str]) -> None:
        if len(args) != 1:
            self.echo("Usage: select ID")
            return
        activity_id = args[0]
        if not self.engine.is_activity_tracking_enabled:
            self.echo("Activity tracking is off. Use 'tracking on' first.")
            return
        if self.engine.repository.find_activity(activity_id) is None:
            self.echo(f"No activity with id {activity_id}.")
            return
        self.engine.set_selected_activity(activity_id)
        self._status(args)

    def _deselect(self, args: list[str]) -> None:
        self.engine.set_selected_activity(None)
        self._status(args)

    def _tracking(self, args: list[str]) -> None:
        choice = self._parse_switch(args)
        if choice is None:
            self.echo("Usage: tracking on|off")
            return
        self.engine.set_activity_tracking_enabled(choice)
        self.echo(f"Activity tracking {'enabled' if choice else 'disabled'}.")

    def _status(self, args: list[str]) -> None:
        self.echo(self.status_line())

    def _logs(self, args: list[str]) -> None:
        logs = self.engine.activity_logs
        if not logs:
            self.echo("No records yet.")
            return
        for record in logs:
            self.echo(format_record(record))
        if self.engine.inactive_time:
            self.echo(f"Inactive time: {format_human(self.engine.inactive_time)}")

    def _clear(self, args: list[str]) -> None:
        self.engine.clear_logs()
        self.echo("Logs cleared.")

    def _help(self, args: list[str]) -> None:
        self.echo(HELP_TEXT)

    @staticmethod
    def _parse_switch(args: list[str]) -> Optional[bool]:
        if len(args) != 1:
            return None
        return {"on": True, "off": False}.get(args[0].lower())
