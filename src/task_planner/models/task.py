"""Task data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, StrEnum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class TaskPriority(StrEnum):
    """Task priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @classmethod
    def from_db(cls, raw: str | None) -> TaskPriority:
        if not raw:
            return cls.MEDIUM
        try:
            return cls(raw)
        except ValueError:
            return cls.MEDIUM


class TaskStatus(StrEnum):
    """Task lifecycle status."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ARCHIVED = "archived"

    @classmethod
    def from_db(cls, raw: str | None) -> TaskStatus:
        if not raw:
            return cls.PENDING
        try:
            return cls(raw)
        except ValueError:
            return cls.PENDING


DEFAULT_CATEGORY = "general"


class Task(BaseModel):
    """Task model representing a stored task.

    Attributes:
        id: Identifier assigned by the store
        title: Short task title
        description: Free-form details, may be empty
        priority: Priority level
        status: Lifecycle status
        category: Grouping label
        due_date: Calendar date string, or None when there is no due date
        created_at: Insertion timestamp
        updated_at: Last mutation timestamp
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    description: str = ""
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING
    category: str = DEFAULT_CATEGORY
    due_date: str | None = None
    created_at: datetime
    updated_at: datetime

    def to_wire(self) -> dict[str, Any]:
        """Serialize with camelCase keys and ISO timestamps."""
        return self.model_dump(mode="json", by_alias=True)


class TaskCreate(BaseModel):
    """Validated payload for creating a task.

    Omitted fields fall back to the declared defaults.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(min_length=1)
    description: str = ""
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING
    category: str = Field(default=DEFAULT_CATEGORY, min_length=1)
    due_date: str | None = None


class UpdateKind(Enum):
    UNSET = "unset"
    CLEAR = "clear"
    SET = "set"


@dataclass(frozen=True, slots=True)
class FieldUpdate(Generic[T]):
    """One field of a partial update: leave it, clear it, or set it."""

    kind: UpdateKind = UpdateKind.UNSET
    value: T | None = None

    @classmethod
    def unset(cls) -> FieldUpdate[Any]:
        return cls(UpdateKind.UNSET)

    @classmethod
    def clear(cls) -> FieldUpdate[Any]:
        return cls(UpdateKind.CLEAR)

    @classmethod
    def set(cls, value: T) -> FieldUpdate[T]:
        return cls(UpdateKind.SET, value)

    @property
    def is_unset(self) -> bool:
        return self.kind is UpdateKind.UNSET


UNSET: FieldUpdate[Any] = FieldUpdate.unset()


@dataclass(frozen=True, slots=True)
class TaskUpdate:
    """Validated partial update.

    Every field defaults to UNSET. Only ``due_date`` is ever CLEAR; the
    other columns are NOT NULL, so an explicit null for them means
    "leave unchanged".
    """

    title: FieldUpdate[str] = UNSET
    description: FieldUpdate[str] = UNSET
    priority: FieldUpdate[TaskPriority] = UNSET
    status: FieldUpdate[TaskStatus] = UNSET
    category: FieldUpdate[str] = UNSET
    due_date: FieldUpdate[str] = UNSET

    FIELDS = ("title", "description", "priority", "status", "category", "due_date")

    def changes(self) -> dict[str, FieldUpdate[Any]]:
        """Return the fields that are not UNSET, keyed by column name."""
        result: dict[str, FieldUpdate[Any]] = {}
        for name in self.FIELDS:
            update = getattr(self, name)
            if not update.is_unset:
                result[name] = update
        return result

    @classmethod
    def from_values(cls, **values: Any) -> TaskUpdate:
        """Build an update from plain keyword values.

        A keyword that is not given stays UNSET, ``due_date=None`` clears
        the due date, and ``None`` for any other field stays UNSET.
        """
        kwargs: dict[str, FieldUpdate[Any]] = {}
        for name, value in values.items():
            if name not in cls.FIELDS:
                raise TypeError(f"Unknown task field: {name}")
            if value is None:
                if name == "due_date":
                    kwargs[name] = FieldUpdate.clear()
                continue
            kwargs[name] = FieldUpdate.set(value)
        return cls(**kwargs)
