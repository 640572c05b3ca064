"""Task service - Business logic for task operations.

This service layer sits between the command-line surface (or any HTTP
adapter) and the repository. It parses identifiers, runs the validation
pipeline, and turns "no such task" into TaskNotFoundError.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime
from typing import Any

from task_planner import __version__
from task_planner.errors import MalformedIdentifierError, TaskNotFoundError
from task_planner.models import Task
from task_planner.repositories import TaskRepository
from task_planner.services.validation import parse_create_payload, parse_update_payload

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"-?[0-9]+")

# SQLite INTEGER is a signed 64-bit value
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


def parse_task_id(raw_id: Any) -> int:
    """Read a caller-supplied identifier as a task id.

    Only plain decimal digits with an optional minus sign are accepted.

    Raises:
        MalformedIdentifierError: If the value is not an integer
        TaskNotFoundError: If the integer cannot be a stored id
    """
    if isinstance(raw_id, bool):
        raise MalformedIdentifierError(raw_id)
    if isinstance(raw_id, int):
        task_id = raw_id
    elif isinstance(raw_id, str) and _ID_PATTERN.fullmatch(raw_id.strip()):
        task_id = int(raw_id.strip())
    else:
        raise MalformedIdentifierError(raw_id)

    if not _MIN_ID <= task_id <= _MAX_ID:
        raise TaskNotFoundError(task_id)
    return task_id


def success_envelope(data: Any) -> dict[str, Any]:
    """Wrap a result the way the REST boundary returns it."""
    if isinstance(data, Task):
        data = data.to_wire()
    elif isinstance(data, list):
        data = [t.to_wire() if isinstance(t, Task) else t for t in data]
    return {"success": True, "data": data}


def error_envelope(error: str | list[str]) -> dict[str, Any]:
    return {"success": False, "error": error}


class TaskService:
    """Service for task business logic."""

    def __init__(self, task_repository: TaskRepository):
        """Initialize the task service.

        Args:
            task_repository: TaskRepository implementation for data access
        """
        self.repository = task_repository

    def list_tasks(self) -> list[Task]:
        """List every task, most recently created first."""
        return self.repository.find_all()

    def get_task(self, raw_id: Any) -> Task:
        """Get a specific task by ID.

        Raises:
            MalformedIdentifierError: If the id is not numeric
            TaskNotFoundError: If no task has that id
        """
        task_id = parse_task_id(raw_id)
        task = self.repository.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def create_task(self, payload: Any) -> Task:
        """Validate a raw payload and create a task.

        Raises:
            ValidationError: With every rule the payload breaks
        """
        task_data = parse_create_payload(payload)
        return self.repository.create(task_data)

    def update_task(self, raw_id: Any, payload: Any) -> Task:
        """Validate a raw partial payload and apply it.

        Raises:
            MalformedIdentifierError: If the id is not numeric
            ValidationError: With every rule the payload breaks
            TaskNotFoundError: If no task has that id
        """
        task_id = parse_task_id(raw_id)
        updates = parse_update_payload(payload)
        task = self.repository.update(task_id, updates)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def delete_task(self, raw_id: Any) -> None:
        """Delete a task permanently.

        Raises:
            MalformedIdentifierError: If the id is not numeric
            TaskNotFoundError: If no task has that id
        """
        task_id = parse_task_id(raw_id)
        if not self.repository.remove(task_id):
            raise TaskNotFoundError(task_id)

    def health(self) -> dict[str, Any]:
        return {
            "status": "ok",
            "timestamp": datetime.now(UTC).isoformat(),
            "version": __version__,
            "tasks": self.repository.count(),
        }
