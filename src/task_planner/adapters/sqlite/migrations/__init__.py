"""Database migration system for the task planner store."""

from .m001_create_tasks_table import create_tasks_table
from .m002_index_tasks_created_at import index_tasks_created_at
from .runner import (
    Migration,
    MigrationRunner,
    run_migrations,
)

# Declaration order is application order. Append only.
MIGRATIONS: list[Migration] = [
    create_tasks_table,
    index_tasks_created_at,
]

__all__ = [
    "MIGRATIONS",
    "Migration",
    "MigrationRunner",
    "run_migrations",
]
