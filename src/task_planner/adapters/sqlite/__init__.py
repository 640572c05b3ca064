"""SQLite adapter module - local database storage implementation."""

from task_planner.adapters.sqlite.connection import Database, open_database
from task_planner.adapters.sqlite.task_repository import SqliteTaskRepository

__all__ = [
    "Database",
    "SqliteTaskRepository",
    "open_database",
]
