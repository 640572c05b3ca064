"""Services module for Task Planner - Business logic layer."""

from .seed_service import SAMPLE_TASKS, seed_tasks
from .task_service import TaskService, parse_task_id
from .validation import (
    ValidationMode,
    parse_create_payload,
    parse_update_payload,
    validate_task_payload,
)

__all__ = [
    "TaskService",
    "parse_task_id",
    "SAMPLE_TASKS",
    "seed_tasks",
    "ValidationMode",
    "validate_task_payload",
    "parse_create_payload",
    "parse_update_payload",
]
