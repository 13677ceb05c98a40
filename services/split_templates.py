"""
Split templates for weekly program generation.

Maps a weekly training frequency to a fixed, ordered list of day templates.
Splits are pure functions of frequency and are recomputed on every
generation request:

- 2-3 sessions: Full Body
- 4 sessions: Upper/Lower
- 5 sessions: Push/Pull/Legs
"""

from dataclasses import dataclass
from typing import List, Tuple

from models.exercise import CANONICAL_MUSCLE_ORDER, MuscleGroup
from models.program import SplitType

FULL_BODY_MUSCLES: Tuple[MuscleGroup, ...] = (
    MuscleGroup.CHEST,
    MuscleGroup.BACK,
    MuscleGroup.LEGS,
    MuscleGroup.SHOULDERS,
    MuscleGroup.ARMS,
)


@dataclass(frozen=True)
class SplitTemplate:
    """One training day within a weekly split."""

    name: str
    day_of_week: int  # 1=Monday, 7=Sunday
    target_muscles: Tuple[MuscleGroup, ...]

    def targets(self, muscle: MuscleGroup) -> bool:
        return muscle in self.target_muscles


def get_split_type(frequency: int) -> SplitType:
    """Pick the split family for a weekly frequency."""
    if frequency == 4:
        return SplitType.UPPER_LOWER
    if frequency == 5:
        return SplitType.PUSH_PULL_LEGS
    return SplitType.FULL_BODY


def distribute_muscle_groups(frequency: int) -> List[SplitTemplate]:
    """
    Build the ordered day templates for a weekly frequency.

    Args:
        frequency: Training sessions per week

    Returns:
        List of SplitTemplate, one per session, in training order
    """
    split_type = get_split_type(frequency)

    if split_type == SplitType.UPPER_LOWER:
        return _upper_lower_split()
    if split_type == SplitType.PUSH_PULL_LEGS:
        return _push_pull_legs_split()
    return _full_body_split(frequency)


def get_muscle_groups_for_frequency(frequency: int) -> List[MuscleGroup]:
    """Union of every template's targets, in canonical muscle order."""
    targeted = set()
    for template in distribute_muscle_groups(frequency):
        targeted.update(template.target_muscles)

    return [muscle for muscle in CANONICAL_MUSCLE_ORDER if muscle in targeted]


def get_consecutive_day_pairs(templates: List[SplitTemplate]) -> List[Tuple[int, int]]:
    """
    Find template index pairs trained on back-to-back days.

    Consecutiveness comes from the templates' day_of_week values, never from
    calendar dates. Upper/Lower yields [(0, 1), (2, 3)] (Mon/Tue, Thu/Fri).

    Args:
        templates: Day templates of a split

    Returns:
        List of (earlier_index, later_index) tuples in template order
    """
    pairs = []
    for i, first in enumerate(templates):
        for j in range(i + 1, len(templates)):
            if abs(templates[j].day_of_week - first.day_of_week) == 1:
                pairs.append((i, j))
    return pairs


def _full_body_split(frequency: int) -> List[SplitTemplate]:
    """2-3 sessions: every day trains every major muscle."""
    return [
        SplitTemplate(
            name=f"Full Body {i + 1}",
            day_of_week=_full_body_day_of_week(i, frequency),
            target_muscles=FULL_BODY_MUSCLES,
        )
        for i in range(frequency)
    ]


def _full_body_day_of_week(session_index: int, frequency: int) -> int:
    """Spread full body sessions across the week."""
    if frequency == 2:
        return (1, 4)[session_index]  # Mon, Thu
    if frequency == 3:
        return (1, 3, 5)[session_index]  # Mon, Wed, Fri
    return session_index + 1


def _upper_lower_split() -> List[SplitTemplate]:
    """4 sessions: Upper/Lower twice."""
    return [
        SplitTemplate(
            name="Upper Body A",
            day_of_week=1,
            target_muscles=(MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.SHOULDERS),
        ),
        SplitTemplate(
            name="Lower Body A",
            day_of_week=2,
            target_muscles=(MuscleGroup.LEGS,),
        ),
        SplitTemplate(
            name="Upper Body B",
            day_of_week=4,
            target_muscles=(MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.ARMS),
        ),
        SplitTemplate(
            name="Lower Body B",
            day_of_week=5,
            target_muscles=(MuscleGroup.LEGS,),
        ),
    ]


def _push_pull_legs_split() -> List[SplitTemplate]:
    """5 sessions: PPL + Upper/Lower."""
    return [
        SplitTemplate(
            name="Push Day",
            day_of_week=1,
            target_muscles=(MuscleGroup.CHEST, MuscleGroup.SHOULDERS),
        ),
        SplitTemplate(
            name="Pull Day",
            day_of_week=2,
            target_muscles=(MuscleGroup.BACK, MuscleGroup.ARMS),
        ),
        SplitTemplate(
            name="Leg Day",
            day_of_week=3,
            target_muscles=(MuscleGroup.LEGS,),
        ),
        SplitTemplate(
            name="Upper Day",
            day_of_week=5,
            target_muscles=(MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.SHOULDERS),
        ),
        SplitTemplate(
            name="Lower Day",
            day_of_week=6,
            target_muscles=(MuscleGroup.LEGS, MuscleGroup.CORE),
        ),
    ]
