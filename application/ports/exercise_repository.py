"""
Exercise repository port (interface).

This Protocol defines the contract for exercise catalog access.
Infrastructure implementations (e.g., the YAML seed catalog) must satisfy
this interface.
"""

from typing import Iterable, List, Optional, Protocol

from models.exercise import Equipment, Exercise, MuscleGroup


class ExerciseRepository(Protocol):
    """
    Repository interface for exercise catalog access.

    Exercises are read-only reference data used during program generation.
    """

    def get_all(self) -> List[Exercise]:
        """
        Get every exercise in the catalog.

        Returns:
            List of exercises in catalog order
        """
        ...

    def get_by_id(self, exercise_id: int) -> Optional[Exercise]:
        """
        Get an exercise by its ID.

        Args:
            exercise_id: The exercise identifier

        Returns:
            Exercise if found, None otherwise
        """
        ...

    def get_by_ids(self, exercise_ids: Iterable[int]) -> List[Exercise]:
        """
        Get several exercises, preserving the requested order.

        Args:
            exercise_ids: Exercise identifiers

        Returns:
            Exercises for the IDs that exist; unknown IDs are skipped
        """
        ...

    def get_by_name(self, name: str) -> Optional[Exercise]:
        """
        Get an exercise by name (case-insensitive, surrounding whitespace ignored).

        Args:
            name: The exercise name

        Returns:
            Exercise if found, None otherwise
        """
        ...

    def get_by_equipment(self, equipment: Iterable[Equipment]) -> List[Exercise]:
        """
        Get exercises that can be performed with the given equipment.

        Bodyweight exercises are always included.

        Args:
            equipment: Available equipment

        Returns:
            List of matching exercises
        """
        ...

    def get_by_primary_muscle(self, muscle: MuscleGroup) -> List[Exercise]:
        """
        Get exercises whose primary muscle is the given group.

        Args:
            muscle: Muscle group

        Returns:
            List of matching exercises
        """
        ...
