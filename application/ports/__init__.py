"""
Port interfaces (Protocols) for the split planner.

This package defines the interface contracts that the infrastructure
layer must implement. Using Protocols enables:
- Clean separation of concerns
- Easy testing with in-memory implementations
- Dependency inversion (depend on abstractions, not concretions)
"""

from application.ports.exercise_repository import ExerciseRepository

__all__ = [
    "ExerciseRepository",
]
