"""Repository abstraction layer for Task Planner.

Defines the port the service layer talks to. Storage adapters (currently
SQLite) implement it; callers never reach for SQL directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from task_planner.models import Task, TaskCreate, TaskUpdate


class TaskRepository(ABC):
    """Abstract base class for task persistence operations.

    Payloads handed to the mutating methods must already have passed the
    validation pipeline.
    """

    @abstractmethod
    def find_all(self) -> list[Task]:
        """List every task, most recently created first.

        Returns:
            List of Task objects
        """
        raise NotImplementedError(
            "TaskRepository.find_all() must be implemented by adapter"
        )

    @abstractmethod
    def find_by_id(self, task_id: int) -> Task | None:
        """Get a specific task by ID.

        Args:
            task_id: Identifier of the task

        Returns:
            Task object, or None if no task has that id
        """
        raise NotImplementedError(
            "TaskRepository.find_by_id() must be implemented by adapter"
        )

    @abstractmethod
    def create(self, payload: TaskCreate) -> Task:
        """Create a new task.

        Args:
            payload: Validated TaskCreate

        Returns:
            The stored task as re-read from storage
        """
        raise NotImplementedError(
            "TaskRepository.create() must be implemented by adapter"
        )

    @abstractmethod
    def update(self, task_id: int, payload: TaskUpdate) -> Task | None:
        """Apply a partial update.

        Args:
            task_id: Identifier of the task
            payload: Validated TaskUpdate; UNSET fields are left untouched

        Returns:
            The stored task as re-read from storage, or None if no task has that id
        """
        raise NotImplementedError(
            "TaskRepository.update() must be implemented by adapter"
        )

    @abstractmethod
    def remove(self, task_id: int) -> bool:
        """Delete a task permanently.

        Args:
            task_id: Identifier of the task

        Returns:
            True if a task was removed, False if none had that id
        """
        raise NotImplementedError(
            "TaskRepository.remove() must be implemented by adapter"
        )

    @abstractmethod
    def count(self) -> int:
        """Number of stored tasks."""
        raise NotImplementedError(
            "TaskRepository.count() must be implemented by adapter"
        )

    @abstractmethod
    def clear(self) -> int:
        """Delete every task.

        Returns:
            Number of tasks removed
        """
        raise NotImplementedError(
            "TaskRepository.clear() must be implemented by adapter"
        )
