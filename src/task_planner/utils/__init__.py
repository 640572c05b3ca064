"""Shared helpers for Task Planner."""
