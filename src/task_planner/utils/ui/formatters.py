"""Output formatters for different formats."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.table import Table
from rich.text import Text

from task_planner.utils.ui.console import get_console

console = get_console()

PRIORITY_STYLES = {
    "low": "dim",
    "medium": "white",
    "high": "yellow",
    "critical": "bold red",
}

STATUS_ICONS = {
    "pending": "○",
    "in_progress": "◐",
    "completed": "●",
    "archived": "▪",
}

TASK_COLUMNS = ("id", "title", "priority", "status", "category", "dueDate")


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and display output based on format.

    ``json`` and ``yaml`` print the data as given (normally a
    ``{success, data}`` envelope); ``table`` renders tasks for humans.
    """
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    else:
        format_table(data)


def format_table(data: Any) -> None:
    """Format data as a table."""
    if isinstance(data, dict) and "data" in data:
        data = data["data"]

    if isinstance(data, list):
        format_tasks_table(data)
    elif isinstance(data, dict):
        format_single_item(data)
    elif data is not None:
        console.print(data)


def format_tasks_table(tasks: list[dict]) -> None:
    """Format a list of wire-format tasks as a table."""
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    for col in TASK_COLUMNS:
        table.add_column("Due" if col == "dueDate" else col.title())

    for task in tasks:
        priority = str(task.get("priority", ""))
        status = str(task.get("status", ""))
        table.add_row(
            str(task.get("id", "")),
            str(task.get("title", "")),
            Text(priority, style=PRIORITY_STYLES.get(priority, "")),
            f"{STATUS_ICONS.get(status, ' ')} {status}",
            str(task.get("category", "")),
            task.get("dueDate") or "-",
        )

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        if isinstance(value, list):
            formatted_value = ", ".join(str(v) for v in value)
        elif value is None or value == "":
            formatted_value = "-"
        else:
            formatted_value = str(value)
        table.add_row(key, formatted_value)

    console.print(table)


def format_error(message: str | list[str]) -> None:
    """Format and display an error message, or every message of a list."""
    if isinstance(message, list):
        console.print("[bold red]Error:[/bold red]")
        for item in message:
            console.print(f"  • {item}")
        return
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")
