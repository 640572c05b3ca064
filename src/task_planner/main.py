"""Main entry point for Task Planner CLI."""

import typer

from task_planner import __version__
from task_planner.commands import config, db, tasks
from task_planner.commands.decorators import command_wrapper, task_service_session
from task_planner.utils.typer_helpers import SuggestingGroup
from task_planner.utils.ui.console import get_console
from task_planner.utils.ui.formatters import format_output

app = typer.Typer(
    name="task-planner",
    cls=SuggestingGroup,
    help="Plan and track tasks in a local SQLite store",
    no_args_is_help=True,
)

console = get_console()

app.add_typer(tasks.app, name="tasks", help="Task management commands")
app.add_typer(db.app, name="db", help="Database maintenance (migrate, reset, seed)")
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Task Planner[/bold] version [cyan]{__version__}[/cyan]")


@app.command()
@command_wrapper
def health(
    output: str = typer.Option("json", "--output", "-o", help="Output format"),
) -> None:
    """Open the database and report its status."""
    with task_service_session() as service:
        report = service.health()
    format_output(report, output)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
