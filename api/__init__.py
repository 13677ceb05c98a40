"""
API package for the split planner.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_exercise_repo,
    get_program_generator,
    get_settings,
)

__all__ = [
    "get_exercise_repo",
    "get_program_generator",
    "get_settings",
]
