"""Database maintenance commands."""

from __future__ import annotations

import typer

from task_planner.adapters.sqlite import SqliteTaskRepository
from task_planner.services.seed_service import seed_tasks
from task_planner.utils.typer_helpers import SuggestingGroup
from task_planner.utils.ui.console import get_console
from task_planner.utils.ui.formatters import (
    format_info,
    format_output,
    format_success,
    format_warning,
)

from .decorators import command_wrapper, open_database

app = typer.Typer(cls=SuggestingGroup, help="Database maintenance commands")
console = get_console()


@app.command("migrate")
@command_wrapper
def migrate() -> None:
    """Apply pending schema migrations."""
    with open_database() as database:
        applied = database.applied_on_open + database.migrate()
        history = database.runner().get_migration_history()

    if applied:
        format_success(f"Applied {len(applied)} migration(s): {', '.join(applied)}")
    format_info(f"Schema up to date ({len(history)} migration(s) applied)")


@app.command("status")
@command_wrapper
def status(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """Show the migration ledger."""
    with open_database() as database:
        history = database.runner().get_migration_history()
        pending = [m.id for m in database.runner().pending()]
        path = str(database.db_path)

    if output == "table":
        console.print(f"[cyan]Database:[/cyan] {path}")
        for entry in history:
            console.print(f"  [green]✓[/green] {entry['id']}  [dim]{entry['applied_at']}[/dim]")
        for migration_id in pending:
            console.print(f"  [yellow]…[/yellow] {migration_id}  [dim]pending[/dim]")
        return
    format_output({"database": path, "applied": history, "pending": pending}, output)


@app.command("reset")
@command_wrapper
def reset(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Drop every task and rebuild the schema."""
    if not yes:
        format_warning("This permanently deletes all tasks.")
        if not typer.confirm("Reset the database?", default=False):
            format_info("Cancelled")
            return

    with open_database() as database:
        applied = database.reset()
    format_success(f"Database reset ({len(applied)} migration(s) applied)")


@app.command("seed")
@command_wrapper
def seed() -> None:
    """Replace all tasks with sample data."""
    with open_database() as database:
        created = seed_tasks(SqliteTaskRepository(database))
    format_success(f"Seeded {len(created)} task(s)")
