"""API layer for the travel savings planner."""
from .routes import router

__all__ = ["router"]
