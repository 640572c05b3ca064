"""Command groups for the Task Planner CLI."""
