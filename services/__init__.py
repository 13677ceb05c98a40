"""Services package for the split planner."""

from services.day_splitter import SplitResult, SplitterLimits, distribute_exercises
from services.exercise_selector import (
    SelectionResult,
    select_initial_exercises,
    select_initial_exercises_with_diagnostics,
)
from services.program_generator import ProgramGenerator

__all__ = [
    "ProgramGenerator",
    "SelectionResult",
    "SplitResult",
    "SplitterLimits",
    "distribute_exercises",
    "select_initial_exercises",
    "select_initial_exercises_with_diagnostics",
]
