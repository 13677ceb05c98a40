"""
Program generator service.

Orchestrates a single generation request end to end:
1. Catalog lookup - load exercises through the ExerciseRepository port
2. Selection - pick the starting pool, or resolve a caller-supplied list
3. Distribution - split the pool over the week (day splitter)
4. Volume - suggest per-session set counts for the chosen focus

Everything below the repository call is pure, so a generator can be shared
between requests.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from application.exceptions import UnknownExerciseError
from application.ports import ExerciseRepository
from core.constants import DEFAULT_PROGRAM_DURATION_WEEKS, EXERCISES_PER_MUSCLE
from models.exercise import Equipment, Exercise
from models.generation import GenerateProgramResponse, GenerationInput
from services.day_splitter import SplitterLimits, distribute_exercises
from services.exercise_selector import (
    SelectionResult,
    filter_by_equipment,
    order_exercises,
    select_initial_exercises_with_diagnostics,
)
from services.set_rep_scheme import calculate_session_volume

logger = logging.getLogger(__name__)


class ProgramGenerator:
    """
    Service for generating weekly training splits from the exercise catalog.

    Wires the catalog port to the pure selection and distribution functions.
    """

    def __init__(
        self,
        exercise_repo: ExerciseRepository,
        limits: Optional[SplitterLimits] = None,
        duration_weeks: int = DEFAULT_PROGRAM_DURATION_WEEKS,
        per_muscle: int = EXERCISES_PER_MUSCLE,
    ):
        """
        Initialize the program generator.

        Args:
            exercise_repo: Repository for exercise catalog access
            limits: Session bounds and iteration caps for the splitter
            duration_weeks: Length of generated programs
            per_muscle: Exercises selected per targeted muscle group
        """
        self._exercise_repo = exercise_repo
        self._limits = limits or SplitterLimits()
        self._duration_weeks = duration_weeks
        self._per_muscle = per_muscle

    @property
    def limits(self) -> SplitterLimits:
        return self._limits

    def select(
        self,
        equipment: Iterable[Equipment | str],
        frequency: int,
    ) -> SelectionResult:
        """Select the starting exercise pool from the full catalog."""
        return select_initial_exercises_with_diagnostics(
            self._exercise_repo.get_all(),
            equipment,
            frequency,
            per_muscle=self._per_muscle,
        )

    def available(self, equipment: Iterable[Equipment | str]) -> List[Exercise]:
        """Catalog exercises usable with the equipment, compounds first."""
        return order_exercises(self._exercise_repo.get_by_equipment(equipment))

    def resolve_ids(self, exercise_ids: Sequence[int]) -> List[Exercise]:
        """
        Look up exercises by ID, preserving the requested order.

        Raises:
            UnknownExerciseError: If any ID is not in the catalog
        """
        exercises = self._exercise_repo.get_by_ids(exercise_ids)
        found = {ex.id for ex in exercises}
        missing = [i for i in exercise_ids if i not in found]
        if missing:
            raise UnknownExerciseError(missing)
        return exercises

    def resolve_names(self, names: Sequence[str]) -> List[Exercise]:
        """
        Look up exercises by name (case-insensitive).

        Raises:
            UnknownExerciseError: If any name is not in the catalog
        """
        exercises = []
        missing = []
        for name in names:
            exercise = self._exercise_repo.get_by_name(name)
            if exercise is None:
                missing.append(name)
            else:
                exercises.append(exercise)
        if missing:
            raise UnknownExerciseError(missing)
        return exercises

    def generate(
        self,
        generation_input: GenerationInput,
        exercise_ids: Optional[Sequence[int]] = None,
    ) -> GenerateProgramResponse:
        """
        Generate a weekly program.

        Args:
            generation_input: Frequency, equipment and focus
            exercise_ids: Custom pool. When omitted the pool is selected
                automatically from the catalog.

        Returns:
            Program with split diagnostics and suggested session volumes

        Raises:
            UnknownExerciseError: If a custom pool references unknown IDs
        """
        if exercise_ids is None:
            pool = self.select(
                generation_input.equipment, generation_input.frequency
            ).selected
        else:
            pool = self.resolve_ids(exercise_ids)

        return self.generate_from_pool(generation_input, pool)

    def generate_from_pool(
        self,
        generation_input: GenerationInput,
        exercises: Sequence[Exercise],
    ) -> GenerateProgramResponse:
        """Distribute an explicit exercise pool, dropping any the user cannot perform."""
        pool = filter_by_equipment(exercises, generation_input.equipment)
        kept_ids = {ex.id for ex in pool}
        dropped = [ex.name for ex in exercises if ex.id not in kept_ids]
        if dropped:
            logger.warning(
                f"Dropped {len(dropped)} exercises needing unavailable equipment: "
                f"{', '.join(dropped)}"
            )

        logger.info(
            f"Generating program: frequency={generation_input.frequency}, "
            f"focus={generation_input.focus.value}, pool={len(pool)}"
        )

        result = distribute_exercises(
            generation_input,
            pool,
            limits=self._limits,
            duration_weeks=self._duration_weeks,
        )

        return GenerateProgramResponse(
            program=result.program,
            diagnostics=result.diagnostics,
            session_volumes=calculate_session_volume(
                generation_input.focus, generation_input.frequency
            ),
        )
