"""Storage adapters for Task Planner."""
