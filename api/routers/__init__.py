"""
Router package for the split planner.

This package contains all API routers organized by domain:
- health: Health check endpoints
- exercises: Exercise catalog lookup
- generation: Exercise selection and program generation
"""

from api.routers.health import router as health_router
from api.routers.exercises import router as exercises_router
from api.routers.generation import router as generation_router

__all__ = [
    "health_router",
    "exercises_router",
    "generation_router",
]
