"""Database schema definitions for the task planner SQLite store."""

from __future__ import annotations

# Tables owned by the store; dropped and recreated by Database.reset()
MANAGED_TABLES = ("tasks", "migrations")

# Migration ledger
CREATE_MIGRATIONS_TABLE = """
CREATE TABLE IF NOT EXISTS migrations (
    id TEXT PRIMARY KEY,
    applied_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
)
"""

# Tasks table - main task entity
CREATE_TASKS_TABLE = """
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    description TEXT DEFAULT '',
    priority TEXT NOT NULL DEFAULT 'medium',
    status TEXT NOT NULL DEFAULT 'pending',
    category TEXT NOT NULL DEFAULT 'general',
    due_date TEXT,
    created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,
    updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
)
"""

CREATE_TASKS_CREATED_AT_INDEX = (
    "CREATE INDEX IF NOT EXISTS idx_tasks_created_at ON tasks(created_at)"
)

TASK_COLUMNS = (
    "id",
    "title",
    "description",
    "priority",
    "status",
    "category",
    "due_date",
    "created_at",
    "updated_at",
)
