"""Sample data for a fresh task planner database."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from task_planner.models import Task
from task_planner.repositories import TaskRepository
from task_planner.services.validation import parse_create_payload

logger = logging.getLogger(__name__)

SAMPLE_TASKS: list[dict[str, Any]] = [
    {
        "title": "Prepare Q4 Planning Workshop",
        "description": (
            "Coordinate with department leads to define agenda and collect "
            "required materials for the upcoming planning workshop."
        ),
        "priority": "high",
        "status": "in_progress",
        "category": "workshop",
        "dueDate": "2025-10-15",
    },
    {
        "title": "Review SAP Fiori Guidelines",
        "description": (
            "Ensure front-end design complies with the latest SAP Fiori UX "
            "recommendations."
        ),
        "priority": "medium",
        "status": "pending",
        "category": "design",
        "dueDate": "2025-10-10",
    },
    {
        "title": "Finalize Demo Script",
        "description": "Polish the narrative for the GitHub Copilot code review session.",
        "priority": "critical",
        "status": "pending",
        "category": "presentation",
        "dueDate": "2025-10-05",
    },
]


def seed_tasks(
    repository: TaskRepository,
    tasks: Iterable[Mapping[str, Any]] = SAMPLE_TASKS,
) -> list[Task]:
    """Replace all stored tasks with the given samples.

    Every sample is validated before anything is deleted.

    Returns:
        The created tasks, in insertion order
    """
    payloads = [parse_create_payload(task) for task in tasks]

    removed = repository.clear()
    created = [repository.create(payload) for payload in payloads]
    logger.info("seeded tasks removed=%s created=%s", removed, len(created))
    return created
