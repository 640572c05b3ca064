"""SQLite implementation of TaskRepository."""

from __future__ import annotations

import logging
import sqlite3
from enum import Enum
from typing import Any

from task_planner.adapters.sqlite.connection import Database
from task_planner.adapters.sqlite.schema import TASK_COLUMNS
from task_planner.adapters.sqlite.utils import now_iso, parse_datetime, row_to_dict
from task_planner.models import (
    DEFAULT_CATEGORY,
    Task,
    TaskCreate,
    TaskPriority,
    TaskStatus,
    TaskUpdate,
    UpdateKind,
)
from task_planner.repositories import TaskRepository

logger = logging.getLogger(__name__)

_SELECT_COLUMNS = ", ".join(TASK_COLUMNS)


def _to_db(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


class SqliteTaskRepository(TaskRepository):
    """SQLite implementation of task repository."""

    def __init__(self, database: Database):
        """Initialize SQLite task repository.

        Args:
            database: Database handle; opened on first use if needed.
        """
        self.database = database

    @property
    def connection(self) -> sqlite3.Connection:
        """Get the database connection."""
        return self.database.connection

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        task_dict = row_to_dict(row)
        return Task(
            id=int(task_dict["id"]),
            title=task_dict["title"],
            description=task_dict.get("description") or "",
            priority=TaskPriority.from_db(task_dict.get("priority")),
            status=TaskStatus.from_db(task_dict.get("status")),
            category=task_dict.get("category") or DEFAULT_CATEGORY,
            due_date=task_dict.get("due_date"),
            created_at=parse_datetime(task_dict["created_at"]),
            updated_at=parse_datetime(task_dict["updated_at"]),
        )

    def find_all(self) -> list[Task]:
        """List all tasks, newest first; ties go to the later insert."""
        cursor = self.connection.execute(
            f"SELECT {_SELECT_COLUMNS} FROM tasks ORDER BY created_at DESC, id DESC"
        )
        return [self._row_to_task(row) for row in cursor.fetchall()]

    def find_by_id(self, task_id: int) -> Task | None:
        """Get a specific task by ID."""
        cursor = self.connection.execute(
            f"SELECT {_SELECT_COLUMNS} FROM tasks WHERE id = ?", (int(task_id),)
        )
        row = cursor.fetchone()
        return self._row_to_task(row) if row else None

    def create(self, payload: TaskCreate) -> Task:
        """Create a new task."""
        now = now_iso()

        with self.database.transaction() as connection:
            cursor = connection.execute(
                """INSERT INTO tasks (
                    title, description, priority, status, category, due_date,
                    created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
                (
                    payload.title,
                    payload.description,
                    _to_db(payload.priority),
                    _to_db(payload.status),
                    payload.category,
                    payload.due_date,
                    now,
                    now,
                ),
            )
            rowid = cursor.lastrowid

        if rowid is None:
            raise RuntimeError("SQLite did not return lastrowid for tasks insert")

        task_id = int(rowid)
        logger.info(
            "task created id=%s priority=%s status=%s",
            task_id,
            _to_db(payload.priority),
            _to_db(payload.status),
        )
        task = self.find_by_id(task_id)
        if task is None:
            raise RuntimeError(f"Task {task_id} vanished after insert")
        return task

    def update(self, task_id: int, payload: TaskUpdate) -> Task | None:
        """Update an existing task.

        SET fields overwrite, CLEAR fields become NULL, UNSET fields keep
        their stored value. updated_at is refreshed even when nothing else
        changes, and never falls behind created_at.
        """
        set_parts: list[str] = []
        params: list[Any] = []

        for column, change in payload.changes().items():
            if change.kind is UpdateKind.CLEAR:
                set_parts.append(f"{column} = NULL")
            else:
                set_parts.append(f"{column} = ?")
                params.append(_to_db(change.value))

        set_parts.append("updated_at = MAX(?, created_at)")
        params.append(now_iso())

        query = f"UPDATE tasks SET {', '.join(set_parts)} WHERE id = ?"
        params.append(int(task_id))

        with self.database.transaction() as connection:
            cursor = connection.execute(query, params)
            changed = cursor.rowcount

        if changed == 0:
            return None

        logger.info(
            "task updated id=%s fields=%s", task_id, sorted(payload.changes())
        )
        return self.find_by_id(task_id)

    def remove(self, task_id: int) -> bool:
        """Delete a task (hard delete)."""
        with self.database.transaction() as connection:
            cursor = connection.execute(
                "DELETE FROM tasks WHERE id = ?", (int(task_id),)
            )
            removed = cursor.rowcount > 0

        if removed:
            logger.info("task removed id=%s", task_id)
        return removed

    def count(self) -> int:
        cursor = self.connection.execute("SELECT COUNT(*) FROM tasks")
        (n,) = cursor.fetchone()
        return int(n)

    def clear(self) -> int:
        """Delete every task. Ids keep counting up afterwards."""
        with self.database.transaction() as connection:
            cursor = connection.execute("DELETE FROM tasks")
            removed = cursor.rowcount

        logger.info("tasks cleared count=%s", removed)
        return removed
