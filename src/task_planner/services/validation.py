"""Validation pipeline for task payloads.

Raw payloads come from untyped sources (command-line options, decoded JSON
bodies). Every rule runs independently and all violations are collected, so
the caller can report them at once. String fields are trimmed before they are
checked and before they are handed to the store.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime
from enum import StrEnum
from typing import Any

from task_planner.errors import ValidationError
from task_planner.models import (
    FieldUpdate,
    TaskCreate,
    TaskPriority,
    TaskStatus,
    TaskUpdate,
)

logger = logging.getLogger(__name__)

PRIORITIES = [p.value for p in TaskPriority]
STATUSES = [s.value for s in TaskStatus]

# Wire names accepted for each task field
FIELD_ALIASES = {
    "title": "title",
    "description": "description",
    "priority": "priority",
    "status": "status",
    "category": "category",
    "dueDate": "due_date",
    "due_date": "due_date",
}

TEXT_FIELDS = ("title", "description", "category")

MISSING: Any = object()


class ValidationMode(StrEnum):
    CREATE = "create"
    UPDATE = "update"


def is_valid_date(value: str) -> bool:
    """Return True if *value* parses as a calendar date.

    Accepts ``YYYY-MM-DD`` and full ISO 8601 datetimes.
    """
    text = value.strip()
    try:
        date.fromisoformat(text)
        return True
    except ValueError:
        pass
    try:
        datetime.fromisoformat(text.replace("Z", "+00:00"))
        return True
    except ValueError:
        return False


def sanitize_payload(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Normalize keys and trim strings.

    Unknown keys are dropped. Absent fields stay absent, explicit nulls stay
    null, and an empty due date is read as null.
    """
    cleaned: dict[str, Any] = {}
    for key, value in raw.items():
        field = FIELD_ALIASES.get(key)
        if field is None:
            logger.debug("ignoring unknown task field %r", key)
            continue
        if isinstance(value, str):
            value = value.strip()
            if field == "due_date" and not value:
                value = None
        cleaned[field] = value
    return cleaned


def _check_text(
    errors: list[str], label: str, value: Any, *, allow_empty: bool
) -> None:
    if value is MISSING or value is None:
        return
    if not isinstance(value, str):
        errors.append(f"{label} must be a string.")
    elif not allow_empty and not value:
        errors.append(f"{label} must not be empty.")


def _check_choice(errors: list[str], label: str, value: Any, choices: list[str]) -> None:
    if value is MISSING or value is None:
        return
    if value not in choices:
        errors.append(f"{label} must be one of: {', '.join(choices)}.")


def _collect_errors(cleaned: Mapping[str, Any], mode: ValidationMode) -> list[str]:
    errors: list[str] = []

    title = cleaned.get("title", MISSING)
    if mode is ValidationMode.CREATE and (title is MISSING or title is None):
        errors.append("Title is required.")
    else:
        _check_text(errors, "Title", title, allow_empty=False)

    _check_text(errors, "Description", cleaned.get("description", MISSING), allow_empty=True)
    _check_text(errors, "Category", cleaned.get("category", MISSING), allow_empty=False)
    _check_choice(errors, "Priority", cleaned.get("priority", MISSING), PRIORITIES)
    _check_choice(errors, "Status", cleaned.get("status", MISSING), STATUSES)

    due_date = cleaned.get("due_date", MISSING)
    if due_date is not MISSING and due_date is not None:
        if not isinstance(due_date, str):
            errors.append("Due date must be a string.")
        elif not is_valid_date(due_date):
            errors.append("Due date must be a valid date (YYYY-MM-DD).")

    return errors


def validate_task_payload(raw: Any, mode: ValidationMode | str) -> list[str]:
    """Check a raw payload against the field rules.

    Args:
        raw: Untyped payload, normally a mapping decoded from JSON
        mode: ``create`` requires a title; ``update`` makes every field optional

    Returns:
        List of violation messages; empty when the payload is acceptable
    """
    if not isinstance(raw, Mapping):
        return ["Payload must be an object."]
    return _collect_errors(sanitize_payload(raw), ValidationMode(mode))


def parse_create_payload(raw: Any) -> TaskCreate:
    """Validate and convert a raw create payload.

    Raises:
        ValidationError: With every violation found
    """
    errors = validate_task_payload(raw, ValidationMode.CREATE)
    if errors:
        logger.debug("create payload rejected: %s", errors)
        raise ValidationError(errors)

    # Explicit nulls fall back to the declared defaults
    cleaned = {
        field: value
        for field, value in sanitize_payload(raw).items()
        if value is not None
    }
    return TaskCreate(**cleaned)


def parse_update_payload(raw: Any) -> TaskUpdate:
    """Validate and convert a raw update payload.

    Absent fields become UNSET. An explicit null clears ``due_date`` and
    leaves every other field unchanged.

    Raises:
        ValidationError: With every violation found
    """
    errors = validate_task_payload(raw, ValidationMode.UPDATE)
    if errors:
        logger.debug("update payload rejected: %s", errors)
        raise ValidationError(errors)

    cleaned = sanitize_payload(raw)
    changes: dict[str, FieldUpdate[Any]] = {}
    for field, value in cleaned.items():
        if value is None:
            if field == "due_date":
                changes[field] = FieldUpdate.clear()
            continue
        if field == "priority":
            value = TaskPriority(value)
        elif field == "status":
            value = TaskStatus(value)
        changes[field] = FieldUpdate.set(value)
    return TaskUpdate(**changes)
