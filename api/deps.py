"""
FastAPI Dependency Providers for the split planner.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations.

Architecture:
- Settings and the exercise catalog are cached per-process (lru_cache)
- The program generator is created per-request from cached parts

Usage in routers:
    from api.deps import get_exercise_repo
    from application.ports import ExerciseRepository

    @router.get("/exercises")
    def list_exercises(
        exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
    ):
        return exercise_repo.get_all()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_exercise_repo] = lambda: FakeExerciseRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends

from application.ports import ExerciseRepository
from backend.settings import Settings, get_settings as _get_settings
from infrastructure.catalog import YamlExerciseRepository
from services.program_generator import ProgramGenerator


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Repository Providers
# =============================================================================


@lru_cache
def _load_catalog(path: Optional[str]) -> YamlExerciseRepository:
    return YamlExerciseRepository(path)


def get_exercise_repo(
    settings: Settings = Depends(get_settings),
) -> ExerciseRepository:
    """
    Get exercise repository instance.

    The catalog file is parsed once per configured path.

    Returns:
        ExerciseRepository: Implementation of the exercise catalog
    """
    return _load_catalog(settings.exercise_catalog_path)


# =============================================================================
# Service Providers
# =============================================================================


def get_program_generator(
    settings: Settings = Depends(get_settings),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
) -> ProgramGenerator:
    """
    Create and return a ProgramGenerator instance.

    Args:
        settings: Application settings
        exercise_repo: Exercise repository

    Returns:
        Configured ProgramGenerator instance
    """
    return ProgramGenerator(
        exercise_repo=exercise_repo,
        limits=settings.splitter_limits,
        duration_weeks=settings.program_duration_weeks,
        per_muscle=settings.exercises_per_muscle,
    )
