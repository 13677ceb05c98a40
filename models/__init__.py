"""Models package for the split planner."""

from models.diagnostics import (
    AssignmentPass,
    AssignmentReason,
    MuscleBreakdown,
    OrderingReason,
    SelectionDiagnostics,
    SelectionReason,
    SplitDiagnostics,
)
from models.exercise import CANONICAL_MUSCLE_ORDER, Equipment, Exercise, MuscleGroup
from models.generation import (
    GenerateProgramRequest,
    GenerateProgramResponse,
    GenerationInput,
    SelectExercisesRequest,
    SelectExercisesResponse,
)
from models.program import (
    ProgramExercise,
    ProgramSession,
    SetsRepsScheme,
    SplitType,
    TrainingFocus,
    WorkoutProgram,
)

__all__ = [
    "AssignmentPass",
    "AssignmentReason",
    "CANONICAL_MUSCLE_ORDER",
    "Equipment",
    "Exercise",
    "GenerateProgramRequest",
    "GenerateProgramResponse",
    "GenerationInput",
    "MuscleBreakdown",
    "MuscleGroup",
    "OrderingReason",
    "ProgramExercise",
    "ProgramSession",
    "SelectExercisesRequest",
    "SelectExercisesResponse",
    "SelectionDiagnostics",
    "SelectionReason",
    "SetsRepsScheme",
    "SplitDiagnostics",
    "SplitType",
    "TrainingFocus",
    "WorkoutProgram",
]
