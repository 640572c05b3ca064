"""Repository interfaces (ports) for Task Planner."""

from .repository import TaskRepository

__all__ = ["TaskRepository"]
