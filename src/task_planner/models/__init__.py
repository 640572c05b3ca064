"""Task Planner domain models.

Pydantic models and value types for the entities that flow between the
validation pipeline, the task store and the command-line surface.
"""

from .config_models import AppConfig, OutputConfig
from .task import (
    DEFAULT_CATEGORY,
    UNSET,
    FieldUpdate,
    Task,
    TaskCreate,
    TaskPriority,
    TaskStatus,
    TaskUpdate,
    UpdateKind,
)

__all__ = [
    # Task models
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "TaskPriority",
    "TaskStatus",
    "FieldUpdate",
    "UpdateKind",
    "UNSET",
    "DEFAULT_CATEGORY",
    # Config models
    "AppConfig",
    "OutputConfig",
]
