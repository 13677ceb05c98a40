"""
Exercise selector service for initial exercise selection.

Filters the catalog by available equipment, then picks a bounded number of
exercises per muscle group targeted by the weekly split. Selection is pure
and deterministic: the same catalog, equipment and frequency always yield
the same list in the same order.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from core.constants import EXERCISES_PER_MUSCLE
from models.diagnostics import MuscleBreakdown, SelectionDiagnostics, SelectionReason
from models.exercise import Equipment, Exercise, MuscleGroup
from services.split_templates import get_muscle_groups_for_frequency

logger = logging.getLogger(__name__)


@dataclass
class SelectionResult:
    """Selected exercises plus the trace explaining each pick."""

    selected: List[Exercise]
    diagnostics: SelectionDiagnostics


def exercise_sort_key(exercise: Exercise) -> Tuple[int, str, int]:
    """
    Shared ordering key: priority tier first, then name.

    Used by the selector, every splitter pass and the final session
    ordering. The id breaks ties between identically named entries.
    """
    return (exercise.priority, exercise.name.casefold(), exercise.id)


def order_exercises(exercises: Iterable[Exercise]) -> List[Exercise]:
    """Return a new list sorted compounds-first, then alphabetically."""
    return sorted(exercises, key=exercise_sort_key)


def filter_by_equipment(
    exercises: Iterable[Exercise],
    available_equipment: Iterable[Equipment | str],
) -> List[Exercise]:
    """Keep exercises that need no equipment or only available equipment."""
    available = [Equipment(item) for item in available_equipment]
    return [ex for ex in exercises if ex.is_available_with(available)]


def filter_by_muscle_group(
    exercises: Iterable[Exercise],
    muscle_group: MuscleGroup,
) -> List[Exercise]:
    """Keep exercises that work the muscle group, primary or secondary."""
    return [ex for ex in exercises if muscle_group in ex.muscle_groups]


def filter_by_primary_muscle(
    exercises: Iterable[Exercise],
    muscle_group: MuscleGroup,
) -> List[Exercise]:
    """Keep exercises whose primary muscle is the given group."""
    return [ex for ex in exercises if ex.primary_muscle == muscle_group]


def select_initial_exercises(
    catalog: Sequence[Exercise],
    equipment: Iterable[Equipment | str],
    frequency: int,
    per_muscle: int = EXERCISES_PER_MUSCLE,
) -> List[Exercise]:
    """
    Select the starting exercise pool for a generation request.

    Args:
        catalog: All known exercises (read-only)
        equipment: Available equipment tags
        frequency: Training sessions per week
        per_muscle: Exercises to take per targeted muscle group

    Returns:
        Exercises grouped by muscle in canonical order, each group in
        priority/name order
    """
    return select_initial_exercises_with_diagnostics(
        catalog, equipment, frequency, per_muscle=per_muscle
    ).selected


def select_initial_exercises_with_diagnostics(
    catalog: Sequence[Exercise],
    equipment: Iterable[Equipment | str],
    frequency: int,
    per_muscle: int = EXERCISES_PER_MUSCLE,
) -> SelectionResult:
    """Same as select_initial_exercises, with the selection trace attached."""
    available = filter_by_equipment(catalog, equipment)
    relevant_muscles = get_muscle_groups_for_frequency(frequency)

    selected: List[Exercise] = []
    reasons: List[SelectionReason] = []
    breakdown: List[MuscleBreakdown] = []

    for muscle in relevant_muscles:
        candidates = filter_by_primary_muscle(available, muscle)
        chosen = order_exercises(candidates)[:per_muscle]

        if not chosen:
            logger.debug(f"No {muscle.value} exercises available for selection")

        breakdown.append(
            MuscleBreakdown(
                muscle=muscle,
                candidate_count=len(candidates),
                selected_names=[ex.name for ex in chosen],
            )
        )

        for slot, exercise in enumerate(chosen, start=1):
            selected.append(exercise)
            reasons.append(
                SelectionReason(
                    exercise_id=exercise.id,
                    exercise_name=exercise.name,
                    primary_muscle=exercise.primary_muscle,
                    equipment=exercise.equipment,
                    priority=exercise.priority,
                    is_compound=exercise.is_compound,
                    reason=(
                        f"{muscle.value} slot {slot}/{per_muscle}, "
                        f"priority {exercise.priority}"
                    ),
                )
            )

    logger.info(
        f"Selected {len(selected)} of {len(available)} equipment-compatible "
        f"exercises for {len(relevant_muscles)} muscle groups"
    )

    return SelectionResult(
        selected=selected,
        diagnostics=SelectionDiagnostics(
            filtered_by_equipment=len(available),
            relevant_muscles=relevant_muscles,
            reasons=reasons,
            muscle_breakdown=breakdown,
        ),
    )
