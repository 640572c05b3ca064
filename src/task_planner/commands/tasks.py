"""Task management commands."""

from __future__ import annotations

from typing import Any

import typer

from task_planner.errors import ValidationError
from task_planner.services.config_service import get_config_service
from task_planner.services.task_service import success_envelope
from task_planner.utils.typer_helpers import SuggestingGroup
from task_planner.utils.ui.formatters import format_info, format_output, format_success

from .decorators import command_wrapper, task_service_session

app = typer.Typer(cls=SuggestingGroup, help="Task management commands")

OUTPUT_HELP = "Output format (table, json, yaml)"


def _output_format(output: str | None) -> str:
    return output or get_config_service().config.output.format


@app.command("list")
@command_wrapper
def list_tasks(
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """List all tasks, newest first."""
    with task_service_session() as service:
        tasks = service.list_tasks()
    format_output(success_envelope(tasks), _output_format(output))


@app.command("get")
@command_wrapper
def get_task(
    task_id: str = typer.Argument(..., help="Task ID"),
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """Show one task."""
    with task_service_session() as service:
        task = service.get_task(task_id)
    format_output(success_envelope(task), _output_format(output))


@app.command("create")
@command_wrapper
def create_task(
    title: str = typer.Argument(..., help="Task title"),
    description: str | None = typer.Option(None, "--description", "-d", help="Description"),
    priority: str | None = typer.Option(
        None, "--priority", "-p", help="low, medium, high or critical"
    ),
    status: str | None = typer.Option(
        None, "--status", "-s", help="pending, in_progress, completed or archived"
    ),
    category: str | None = typer.Option(None, "--category", "-c", help="Category"),
    due: str | None = typer.Option(None, "--due", help="Due date (YYYY-MM-DD)"),
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """Create a new task."""
    payload: dict[str, Any] = {"title": title}
    for key, value in (
        ("description", description),
        ("priority", priority),
        ("status", status),
        ("category", category),
        ("dueDate", due),
    ):
        if value is not None:
            payload[key] = value

    with task_service_session() as service:
        task = service.create_task(payload)

    fmt = _output_format(output)
    if fmt == "table":
        format_success(f"Task {task.id} created")
    format_output(success_envelope(task), fmt)


@app.command("update")
@command_wrapper
def update_task(
    task_id: str = typer.Argument(..., help="Task ID"),
    title: str | None = typer.Option(None, "--title", "-t", help="New title"),
    description: str | None = typer.Option(None, "--description", "-d", help="New description"),
    priority: str | None = typer.Option(None, "--priority", "-p", help="New priority"),
    status: str | None = typer.Option(None, "--status", "-s", help="New status"),
    category: str | None = typer.Option(None, "--category", "-c", help="New category"),
    due: str | None = typer.Option(None, "--due", help="New due date (YYYY-MM-DD)"),
    clear_due: bool = typer.Option(False, "--clear-due", help="Remove the due date"),
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """Update some fields of a task; the rest stay as they are."""
    if due is not None and clear_due:
        raise ValidationError(["--due and --clear-due cannot be used together."])

    payload: dict[str, Any] = {}
    for key, value in (
        ("title", title),
        ("description", description),
        ("priority", priority),
        ("status", status),
        ("category", category),
        ("dueDate", due),
    ):
        if value is not None:
            payload[key] = value
    if clear_due:
        payload["dueDate"] = None

    with task_service_session() as service:
        task = service.update_task(task_id, payload)

    fmt = _output_format(output)
    if fmt == "table":
        format_success(f"Task {task.id} updated")
    format_output(success_envelope(task), fmt)


@app.command("delete")
@command_wrapper
def delete_task(
    task_id: str = typer.Argument(..., help="Task ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a task permanently."""
    if not yes and not typer.confirm(f"Delete task {task_id}?", default=False):
        format_info("Cancelled")
        return

    with task_service_session() as service:
        service.delete_task(task_id)
    format_success(f"Task {task_id} deleted")
