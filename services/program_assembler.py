"""
Program assembler.

Turns per-day exercise lists into ordered ProgramSessions, binds the focus
sets/reps scheme to every exercise and wraps the result in a WorkoutProgram.
"""

from typing import List, Sequence, Tuple

from core.constants import DEFAULT_PROGRAM_DURATION_WEEKS
from models.diagnostics import OrderingReason
from models.exercise import Exercise
from models.generation import GenerationInput
from models.program import ProgramExercise, ProgramSession, TrainingFocus, WorkoutProgram
from services.exercise_selector import order_exercises
from services.set_rep_scheme import get_sets_reps_scheme
from services.split_templates import SplitTemplate, get_split_type


def program_name(focus: TrainingFocus, frequency: int) -> str:
    return f"{focus.value} Program ({frequency}x/week)"


def assemble_program(
    generation_input: GenerationInput,
    templates: Sequence[SplitTemplate],
    days: Sequence[Sequence[Exercise]],
    duration_weeks: int = DEFAULT_PROGRAM_DURATION_WEEKS,
) -> Tuple[WorkoutProgram, List[OrderingReason]]:
    """
    Build the final program from the splitter's per-day assignments.

    Exercises within a day are ordered by priority tier, then name, and
    numbered from 1 regardless of the pass that placed them.

    Args:
        generation_input: The generation request
        templates: Day templates, one per entry of ``days``
        days: Exercises assigned to each day
        duration_weeks: Program length

    Returns:
        Tuple of (WorkoutProgram, ordering reasons)
    """
    scheme = get_sets_reps_scheme(generation_input.focus)
    sessions: List[ProgramSession] = []
    ordering: List[OrderingReason] = []

    for session_index, (template, exercises) in enumerate(zip(templates, days)):
        ordered = order_exercises(exercises)
        program_exercises = []

        for position, exercise in enumerate(ordered, start=1):
            program_exercises.append(
                ProgramExercise(
                    exercise=exercise,
                    sets=scheme.sets,
                    reps_min=scheme.reps_min,
                    reps_max=scheme.reps_max,
                    order=position,
                )
            )
            ordering.append(
                OrderingReason(
                    exercise_id=exercise.id,
                    exercise_name=exercise.name,
                    session_index=session_index,
                    session_name=template.name,
                    order=position,
                    reason=(
                        "Compound exercises first"
                        if exercise.is_compound
                        else "Isolation after compounds"
                    ),
                )
            )

        sessions.append(
            ProgramSession(
                name=template.name,
                day_of_week=template.day_of_week,
                primary_muscles=list(template.target_muscles),
                exercises=program_exercises,
            )
        )

    program = WorkoutProgram(
        name=program_name(generation_input.focus, generation_input.frequency),
        focus=generation_input.focus,
        split_type=get_split_type(generation_input.frequency),
        duration_weeks=duration_weeks,
        sessions_per_week=generation_input.frequency,
        sessions=sessions,
    )
    return program, ordering
