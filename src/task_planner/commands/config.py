"""Configuration management commands."""

from __future__ import annotations

import json

import typer

from task_planner.services.config_service import get_config_service
from task_planner.utils.typer_helpers import SuggestingGroup
from task_planner.utils.ui.console import get_console
from task_planner.utils.ui.formatters import format_error, format_success

app = typer.Typer(cls=SuggestingGroup, help="Configuration management")
console = get_console()


@app.command("show")
def show() -> None:
    """Show the current configuration."""
    config_service = get_config_service()
    console.print(f"[cyan]Config file:[/cyan] {config_service.config_path}")
    console.print(f"[cyan]Database:[/cyan] {config_service.get_database_path()}")
    print(json.dumps(config_service.config.model_dump(), indent=2))


@app.command("get")
def get(key: str = typer.Argument(..., help="Dotted key, e.g. output.format")) -> None:
    """Get a configuration value."""
    try:
        value = get_config_service().get(key)
    except KeyError:
        format_error(f"Unknown config key: {key}")
        raise typer.Exit(2)
    if hasattr(value, "model_dump"):
        value = value.model_dump()
    print(json.dumps(value) if not isinstance(value, str) else value)


@app.command("set")
def set_value(
    key: str = typer.Argument(..., help="Dotted key, e.g. output.format"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set a configuration value."""
    try:
        get_config_service().set(key, value)
    except KeyError:
        format_error(f"Unknown config key: {key}")
        raise typer.Exit(2)
    except ValueError as e:
        format_error(str(e))
        raise typer.Exit(2)
    format_success(f"{key} = {value}")


@app.command("reset")
def reset(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Reset configuration to defaults?", default=False):
        return
    get_config_service().reset_config()
    format_success("Configuration reset")
