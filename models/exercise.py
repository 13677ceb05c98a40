"""
Exercise catalog models.

Catalog entries are immutable reference data. The first entry of
``muscle_groups`` is always the primary target; the rest are secondary.
"""

from enum import Enum
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MuscleGroup(str, Enum):
    """Muscle groups, declared in canonical order."""

    CHEST = "Chest"
    BACK = "Back"
    LEGS = "Legs"
    SHOULDERS = "Shoulders"
    ARMS = "Arms"
    CORE = "Core"


# Canonical ordering used wherever muscle groups are listed
CANONICAL_MUSCLE_ORDER: List[MuscleGroup] = list(MuscleGroup)


class Equipment(str, Enum):
    """Equipment tags an exercise may require."""

    BARBELL = "Barbell"
    DUMBBELL = "Dumbbell"
    BODYWEIGHT = "Bodyweight"
    CABLES = "Cables"
    MACHINES = "Machines"
    BANDS = "Bands"


class Exercise(BaseModel):
    """A single catalog exercise."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(min_length=1)
    muscle_groups: List[MuscleGroup] = Field(
        min_length=1, description="First entry is the primary muscle"
    )
    equipment: Optional[Equipment] = Field(
        None, description="None or Bodyweight means always available"
    )
    priority: int = Field(
        ge=1, le=5, description="1 = big compound lift, 5 = pure isolation"
    )
    description: Optional[str] = None

    @property
    def primary_muscle(self) -> MuscleGroup:
        return self.muscle_groups[0]

    @property
    def secondary_muscles(self) -> List[MuscleGroup]:
        return list(self.muscle_groups[1:])

    @property
    def is_compound(self) -> bool:
        """Tiers 1-3 count as compound for ordering purposes."""
        return self.priority <= 3

    @property
    def is_high_recovery(self) -> bool:
        """Heaviest barbell lifts that need a rest day between exposures."""
        return self.priority == 1 and self.equipment == Equipment.BARBELL

    @property
    def equipment_label(self) -> str:
        return self.equipment.value if self.equipment else Equipment.BODYWEIGHT.value

    def is_available_with(self, equipment: Iterable[Equipment | str]) -> bool:
        """
        Check whether the exercise can be performed with the given equipment.

        Bodyweight (or untagged) exercises are always available.
        """
        if self.equipment is None or self.equipment == Equipment.BODYWEIGHT:
            return True
        available = {Equipment(item) for item in equipment}
        return self.equipment in available

    def targets_any(self, muscles: Iterable[MuscleGroup]) -> bool:
        """True if any of this exercise's muscle groups is in ``muscles``."""
        targets = set(muscles)
        return any(muscle in targets for muscle in self.muscle_groups)
