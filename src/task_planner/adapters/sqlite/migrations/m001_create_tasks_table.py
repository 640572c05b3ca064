"""Migration 001: create the tasks table."""

from task_planner.adapters.sqlite import schema
from .runner import Migration

create_tasks_table = Migration(
    id="001_create_tasks_table",
    statement=schema.CREATE_TASKS_TABLE,
    description="Create tasks table",
)
