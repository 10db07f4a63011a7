"""Travel savings planner application."""
