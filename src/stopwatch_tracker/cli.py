"""Command-line interface for the stopwatch tracker."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer

from .colors import normalize_color, random_color
from .config import EngineSettings, dimension_error, parse_dimension, window_defaults
from .models import Activity
from .repository import ActivityRepository

app = typer.Typer(help="Stopwatch with per-activity time tracking.")

DATA_DIR_HELP = "Directory holding the activities, records and settings files."


@app.callback(no_args_is_help=True)
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs.")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def _repository(data_dir: Optional[Path]) -> ActivityRepository:
    return ActivityRepository(data_dir)


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


def _parse_switch(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered not in ("on", "off"):
        _fail("Expected 'on' or 'off'.")
    return lowered == "on"


@app.command()
def run(
    activity: Optional[str] = typer.Option(
        None, "--activity", "-a", help="Activity id to attribute time to."
    ),
    tick_ms: float = typer.Option(
        10.0, "--tick", min=1.0, help="Display refresh interval in milliseconds."
    ),
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", path_type=Path, help=DATA_DIR_HELP
    ),
) -> None:
    """Run an interactive stopwatch session reading commands from stdin."""
    from .console import StopwatchConsole
    from .engine import StopwatchEngine

    repository = _repository(data_dir)
    engine = StopwatchEngine(repository, EngineSettings.from_milliseconds(tick_ms))
    if activity is not None:
        if repository.find_activity(activity) is None:
            _fail(f"No activity with id {activity}.")
        if not engine.is_activity_tracking_enabled:
            engine.set_activity_tracking_enabled(True)
        engine.set_selected_activity(activity)

    console = StopwatchConsole(engine)
    console.echo("Type 'help' for commands.")
    console.run(typer.get_text_stream("stdin"))


@app.command()
def activities(
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", path_type=Path, help=DATA_DIR_HELP
    ),
) -> None:
    """List the configured activities."""
    items = _repository(data_dir).load_activities()
    if not items:
        typer.echo("No activities. Use 'add-activity' to create one.")
        return
    for item in items:
        marker = " " if item.is_active else "x"
        typer.echo(f"[{marker}] {item.id:<20} {item.color:<10} {item.name}")


@app.command("add-activity")
def add_activity(
    name: str = typer.Argument(..., help="Activity name."),
    color: Optional[str] = typer.Option(
        None, "--color", help="Hex color such as #FF5252. Random when omitted."
    ),
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", path_type=Path, help=DATA_DIR_HELP
    ),
) -> None:
    """Create a new activity."""
    name = name.strip()
    if not name:
        _fail("Activity name must not be empty.")
    resolved = normalize_color(color) if color else random_color()
    if resolved is None:
        _fail(f"Invalid color: {color}")
    activity = Activity.create(name, resolved)
    _repository(data_dir).upsert_activity(activity)
    typer.echo(f"Added {activity.name} ({activity.id}).")


@app.command("edit-activity")
def edit_activity(
    activity_id: str = typer.Argument(..., help="Id of the activity to edit."),
    name: Optional[str] = typer.Option(None, "--name", help="New name."),
    color: Optional[str] = typer.Option(None, "--color", help="New hex color."),
    active: Optional[bool] = typer.Option(
        None, "--active/--inactive", help="Whether the activity can be selected."
    ),
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", path_type=Path, help=DATA_DIR_HELP
    ),
) -> None:
    """Rename, recolor or (de)activate an activity."""
    repository = _repository(data_dir)
    activity = repository.find_activity(activity_id)
    if activity is None:
        _fail(f"No activity with id {activity_id}.")
    updates: dict[str, object] = {}
    if name is not None:
        if not name.strip():
            _fail("Activity name must not be empty.")
        updates["name"] = name.strip()
    if color is not None:
        resolved = normalize_color(color)
        if resolved is None:
            _fail(f"Invalid color: {color}")
        updates["color"] = resolved
    if active is not None:
        updates["is_active"] = active
    repository.upsert_activity(activity.model_copy(update=updates))
    typer.echo(f"Updated {activity_id}.")


@app.command("remove-activity")
def remove_activity(
    activity_id: str = typer.Argument(..., help="Id of the activity to remove."),
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", path_type=Path, help=DATA_DIR_HELP
    ),
) -> None:
    """Delete an activity; its history stays in the log."""
    if not _repository(data_dir).delete_activity(activity_id):
        _fail(f"No activity with id {activity_id}.")
    typer.echo(f"Removed {activity_id}.")


@app.command()
def logs(
    limit: Optional[int] = typer.Option(
        None, "--limit", "-n", min=1, help="Show only the newest N entries."
    ),
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", path_type=Path, help=DATA_DIR_HELP
    ),
) -> None:
    """Print the activity log, newest first."""
    from .reporting import SummaryPrinter

    SummaryPrinter(_repository(data_dir)).print_logs(limit)


@app.command()
def summary(
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", path_type=Path, help=DATA_DIR_HELP
    ),
) -> None:
    """Print tracked time per activity and total inactive time."""
    from .reporting import SummaryPrinter

    SummaryPrinter(_repository(data_dir)).print_summary()


@app.command("clear-logs")
def clear_logs(
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", path_type=Path, help=DATA_DIR_HELP
    ),
) -> None:
    """Delete every recorded time entry."""
    if not yes and not typer.confirm("Delete all time records?"):
        raise typer.Abort()
    _repository(data_dir).clear_logs()
    typer.echo("Logs cleared.")


@app.command()
def settings(
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", path_type=Path, help=DATA_DIR_HELP
    ),
) -> None:
    """Show the current settings."""
    current = _repository(data_dir).load_settings()
    typer.echo(f"Activity tracking:     {'on' if current.is_activity_tracking_enabled else 'off'}")
    typer.echo(f"Show logs on main:     {'on' if current.show_logs_in_main_screen else 'off'}")
    typer.echo(f"Main window:           {current.main_window_width}x{current.main_window_height}")
    typer.echo(
        f"Settings window:       {current.settings_window_width}x{current.settings_window_height}"
    )


@app.command("set-window")
def set_window(
    main_width: Optional[str] = typer.Option(None, "--main-width"),
    main_height: Optional[str] = typer.Option(None, "--main-height"),
    settings_width: Optional[str] = typer.Option(None, "--settings-width"),
    settings_height: Optional[str] = typer.Option(None, "--settings-height"),
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", path_type=Path, help=DATA_DIR_HELP
    ),
) -> None:
    """Change window sizes; non-numeric values fall back to the defaults."""
    repository = _repository(data_dir)
    current = repository.load_settings()
    defaults = window_defaults()
    for label, width, height in (
        ("Main window", main_width, main_height),
        ("Settings window", settings_width, settings_height),
    ):
        error = dimension_error(width, height)
        if error:
            typer.echo(f"{label}: {error}", err=True)

    updates: dict[str, int] = {}
    for field, value in (
        ("main_window_width", main_width),
        ("main_window_height", main_height),
        ("settings_window_width", settings_width),
        ("settings_window_height", settings_height),
    ):
        if value is not None:
            updates[field] = parse_dimension(value, defaults[field])
    repository.save_settings(current.model_copy(update=updates))
    typer.echo("Window sizes saved. Changes apply the next time a window opens.")


@app.command()
def tracking(
    state: str = typer.Argument(..., help="'on' or 'off'."),
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", path_type=Path, help=DATA_DIR_HELP
    ),
) -> None:
    """Enable or disable activity tracking."""
    enabled = _parse_switch(state)
    repository = _repository(data_dir)
    current = repository.load_settings()
    repository.save_settings(
        current.model_copy(update={"is_activity_tracking_enabled": enabled})
    )
    typer.echo(f"Activity tracking {'enabled' if enabled else 'disabled'}.")


@app.command("show-logs")
def show_logs(
    state: str = typer.Argument(..., help="'on' or 'off'."),
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", path_type=Path, help=DATA_DIR_HELP
    ),
) -> None:
    """Show or hide the log below the stopwatch."""
    enabled = _parse_switch(state)
    repository = _repository(data_dir)
    current = repository.load_settings()
    repository.save_settings(current.model_copy(update={"show_logs_in_main_screen": enabled}))
    typer.echo(f"Logs on main screen {'shown' if enabled else 'hidden'}.")
