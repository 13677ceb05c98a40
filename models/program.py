"""
Domain models for generated workout programs.

A WorkoutProgram is a plain value: the storage layer assigns IDs and
persists it verbatim once a user accepts it.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from core.constants import DEFAULT_PROGRAM_DURATION_WEEKS
from models.exercise import Exercise, MuscleGroup


class TrainingFocus(str, Enum):
    """Training focus selected by the user."""

    BALANCED = "Balanced"
    STRENGTH = "Strength"
    ENDURANCE = "Endurance"


class SplitType(str, Enum):
    """Weekly split families."""

    FULL_BODY = "Full Body"
    UPPER_LOWER = "Upper/Lower"
    PUSH_PULL_LEGS = "Push/Pull/Legs"


class SetsRepsScheme(BaseModel):
    """Sets and rep range applied to every exercise of a program."""

    sets: int = Field(ge=1)
    reps_min: int = Field(ge=1)
    reps_max: int = Field(ge=1)


class ProgramExercise(BaseModel):
    """An exercise bound to its prescription and position within a session."""

    exercise: Exercise
    sets: int = Field(ge=1)
    reps_min: int = Field(ge=1)
    reps_max: int = Field(ge=1)
    order: int = Field(ge=1, description="1-based position within the session")


class ProgramSession(BaseModel):
    """One training day of the weekly split."""

    name: str
    day_of_week: int = Field(ge=1, le=7, description="1=Monday, 7=Sunday")
    primary_muscles: List[MuscleGroup]
    exercises: List[ProgramExercise] = []


class WorkoutProgram(BaseModel):
    """A complete generated program."""

    name: str
    focus: TrainingFocus
    split_type: SplitType
    duration_weeks: int = Field(default=DEFAULT_PROGRAM_DURATION_WEEKS, ge=1, le=52)
    sessions_per_week: int = Field(ge=1, le=7)
    sessions: List[ProgramSession] = []
