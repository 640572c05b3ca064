"""Migration 002: index tasks by creation time.

The task list is always read newest-first, so the ordering column gets its
own index.
"""

from task_planner.adapters.sqlite import schema
from .runner import Migration

index_tasks_created_at = Migration(
    id="002_index_tasks_created_at",
    statement=schema.CREATE_TASKS_CREATED_AT_INDEX,
    description="Index tasks.created_at for newest-first listing",
)
