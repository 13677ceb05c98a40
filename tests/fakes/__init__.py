"""
Fake implementations for testing.

This package provides in-memory fake implementations of repository
interfaces for fast, isolated testing without touching the YAML catalog.
"""

from tests.fakes.exercise_repository import FakeExerciseRepository
from tests.fakes.factories import make_exercise, make_input

__all__ = [
    "FakeExerciseRepository",
    "make_exercise",
    "make_input",
]
