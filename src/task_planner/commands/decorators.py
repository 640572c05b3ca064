"""Decorators and session helpers for command functions."""

from __future__ import annotations

import functools
import time
import traceback
from collections.abc import Callable, Iterator
from contextlib import contextmanager

import typer

from task_planner.adapters.sqlite import Database, SqliteTaskRepository
from task_planner.errors import TaskPlannerError
from task_planner.services.config_service import get_config_service
from task_planner.services.task_service import TaskService, error_envelope
from task_planner.utils.logger import get_logger
from task_planner.utils.ui.formatters import format_error, format_output


@contextmanager
def open_database() -> Iterator[Database]:
    """Open the configured database and close it on every exit path."""
    config_service = get_config_service()
    database = Database(config_service.get_database_path())
    try:
        database.open()
        yield database
    finally:
        database.close()


@contextmanager
def task_service_session() -> Iterator[TaskService]:
    """Yield a TaskService bound to the configured database."""
    with open_database() as database:
        yield TaskService(SqliteTaskRepository(database))


def _wants_json(kwargs: dict) -> bool:
    """True when the command was asked for json output.

    Commands without an ``output`` option never are; ``None`` means the
    configured default.
    """
    if "output" not in kwargs:
        return False
    fmt = kwargs["output"] or get_config_service().config.output.format
    return fmt == "json"


def command_wrapper(func: Callable) -> Callable:
    """Wrap a command with logging and uniform error reporting."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(get_config_service().config.log_level)
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)

            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except TaskPlannerError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s",
                cmd,
                elapsed,
                str(e),
            )
            if _wants_json(kwargs):
                format_output(error_envelope(e.detail), "json")
            else:
                format_error(e.detail)
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=1) from e

    return wrapper
