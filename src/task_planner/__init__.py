"""Task Planner - a task list backed by a migrated SQLite store."""

__version__ = "1.0.0"
