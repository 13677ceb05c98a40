"""
Infrastructure layer package for the split planner.

This package contains concrete implementations of the port interfaces.
"""

from infrastructure.catalog import YamlExerciseRepository

__all__ = [
    "YamlExerciseRepository",
]
