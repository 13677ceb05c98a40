"""
Exercise catalog infrastructure.

Bundles the seed exercise library and the repository that serves it.
"""

from infrastructure.catalog.exercise_repository import (
    DEFAULT_CATALOG_PATH,
    YamlExerciseRepository,
)

__all__ = [
    "DEFAULT_CATALOG_PATH",
    "YamlExerciseRepository",
]
