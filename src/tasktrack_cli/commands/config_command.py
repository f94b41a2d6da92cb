"""Configuration management commands."""

from typing import Optional

import typer
from pydantic import ValidationError
from rich.markup import escape

from tasktrack_cli.config import get_config_manager
from tasktrack_cli.utils.exit_codes import ERROR_GENERAL, ERROR_INVALID_ARGS
from tasktrack_cli.utils.typer_helpers import SuggestingGroup
from tasktrack_cli.utils.ui.formatters import (
    console,
    format_error,
    format_info,
    format_success,
)

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")


def _parse_value(value: str) -> str | int | bool:
    """Convert a command-line string to the most likely setting type."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.isdigit():
        return int(value)
    return value


@app.command("view")
def view_config(
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """View current configuration."""
    config_manager = get_config_manager(profile)
    for section, values in config_manager.config.model_dump().items():
        for key, value in values.items():
            console.print(f"[cyan]{section}.{key}[/cyan] = {escape(str(value))}")


@app.command("get")
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., storage.path)"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Get a configuration value."""
    config_manager = get_config_manager(profile)
    value = config_manager.get(key)
    if value is None:
        format_error(f"Configuration key '{escape(key)}' not found")
        raise typer.Exit(ERROR_INVALID_ARGS)
    console.print(escape(str(value)))


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., storage.autosave)"),
    value: str = typer.Argument(..., help="Configuration value"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Set a configuration value."""
    config_manager = get_config_manager(profile)
    parsed_value = _parse_value(value)
    try:
        config_manager.set(key, parsed_value)
    except KeyError:
        format_error(f"Configuration key '{escape(key)}' not found")
        raise typer.Exit(ERROR_INVALID_ARGS) from None
    except ValidationError as e:
        message = e.errors()[0]["msg"]
        format_error(f"Invalid value for '{escape(key)}': {escape(message)}")
        raise typer.Exit(ERROR_INVALID_ARGS) from None
    except OSError as e:
        format_error(f"Failed to save config: {escape(str(e))}")
        raise typer.Exit(ERROR_GENERAL) from e
    format_success(
        f"Configuration '{escape(key)}' set to '{escape(str(parsed_value))}'"
    )


@app.command("reset")
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        confirm = typer.confirm(f"Are you sure you want to reset {msg}?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    config_manager = get_config_manager(profile)
    try:
        config_manager.reset(key)
    except KeyError:
        format_error(f"Configuration key '{escape(key)}' not found")
        raise typer.Exit(ERROR_INVALID_ARGS) from None

    if key:
        format_success(f"Configuration '{escape(key)}' reset to default")
    else:
        format_success("Configuration reset to defaults")


@app.command("path")
def config_path(
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Show where the configuration and task file live."""
    config_manager = get_config_manager(profile)
    console.print(f"Config file: {escape(str(config_manager.config_file))}")
    task_file = config_manager.task_file().resolve()
    console.print(f"Task file:   {escape(str(task_file))}")
