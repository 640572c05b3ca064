"""Error kinds raised by the task store, validation pipeline and service layer.

Each error knows the CLI exit code and the HTTP status it maps to, so the
command wrapper and any HTTP adapter report failures the same way.
"""

from __future__ import annotations

from task_planner.utils import exit_codes


class TaskPlannerError(Exception):
    """Base class for application errors."""

    exit_code: int = exit_codes.ERROR_GENERAL
    http_status: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def detail(self) -> str | list[str]:
        """Payload for the ``error`` key of a failure envelope."""
        return self.message


class ValidationError(TaskPlannerError):
    """The payload broke one or more field rules.

    Carries every violation, never just the first one.
    """

    exit_code = exit_codes.ERROR_INVALID_ARGS
    http_status = 400

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors) if errors else "Invalid payload.")
        self.errors = list(errors)

    @property
    def detail(self) -> list[str]:
        return self.errors


class MalformedIdentifierError(TaskPlannerError):
    """The given identifier cannot be read as a task id."""

    exit_code = exit_codes.ERROR_INVALID_ARGS
    http_status = 400

    def __init__(self, raw_id: object):
        super().__init__("Task ID must be a number.")
        self.raw_id = raw_id


class TaskNotFoundError(TaskPlannerError):
    """No task exists with a well-formed id."""

    exit_code = exit_codes.ERROR_NOT_FOUND
    http_status = 404

    def __init__(self, task_id: int):
        super().__init__("Task not found.")
        self.task_id = task_id


class MigrationError(TaskPlannerError, RuntimeError):
    """A schema migration failed; the database must not be used."""

    def __init__(self, migration_id: str, reason: str):
        super().__init__(f"Migration {migration_id} failed: {reason}")
        self.migration_id = migration_id
