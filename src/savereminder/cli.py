"""Typer CLI for save-reminder."""

from __future__ import annotations

import json
import platform

import typer

from savereminder.config import ReminderSettings, load_settings
from savereminder.core.app import open_preferences
from savereminder.core.prefs import load_reminder_settings, save_reminder_settings
from savereminder.core.timer import warning_message
from savereminder.logging import configure_logging

app = typer.Typer(no_args_is_help=True)


@app.command()
def run() -> None:
    """Launch the editor."""

    # Qt is only needed for the GUI; keep the other commands headless.
    from savereminder.main import main as launch

    launch()


@app.command()
def doctor() -> None:
    """Print environment diagnostics."""

    settings = load_settings()
    configure_logging(settings)
    info = {
        "python": platform.python_version(),
        "platform": platform.platform(),
        "backend": settings.ui.backend,
        "paths": {
            "home": str(settings.paths.base_dir),
            "logs": str(settings.paths.logs_dir),
            "preferences": str(settings.paths.preferences_file),
        },
    }
    typer.echo(json.dumps(info, indent=2))


@app.command()
def settings(key: str | None = typer.Argument(None)) -> None:
    """Display the persisted reminder settings or a single field."""

    data = load_reminder_settings(open_preferences(load_settings())).model_dump()
    if key:
        if key not in data:
            typer.echo(f"Unknown setting: {key}", err=True)
            raise typer.Exit(code=1)
        data = {key: data[key]}
    typer.echo(json.dumps(data, indent=2))


@app.command()
def reset() -> None:
    """Write the default reminder settings."""

    save_reminder_settings(open_preferences(load_settings()), ReminderSettings())
    typer.echo("Save reminder settings reset to defaults")


@app.command()
def preview(seconds: float = typer.Argument(..., min=0)) -> None:
    """Print the warning shown after SECONDS of unsaved changes."""

    typer.echo(warning_message(seconds))
