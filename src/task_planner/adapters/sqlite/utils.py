"""Utility functions for SQLite adapter."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any


def now_iso() -> str:
    """Get current timestamp in ISO format.

    Returns:
        ISO format datetime string in UTC
    """
    return datetime.now(UTC).isoformat()


def row_to_dict(row: Any) -> dict[str, Any]:
    """Convert sqlite3.Row to dictionary.

    Args:
        row: sqlite3.Row object

    Returns:
        Dictionary with column names as keys
    """
    if row is None:
        return {}
    return dict(row)


def parse_datetime(value: str | datetime | None) -> datetime | None:
    """Parse a stored timestamp.

    Accepts ISO 8601 text as well as SQLite's ``CURRENT_TIMESTAMP`` format
    (``YYYY-MM-DD HH:MM:SS``, implicitly UTC).

    Args:
        value: String, datetime object, or None

    Returns:
        Timezone-aware datetime or None
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value

    return None
