"""
Request/response models for program generation.

GenerationInput is the immutable request the core algorithm works from;
the remaining models define the HTTP contract around it.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.constants import MAX_FREQUENCY, MIN_FREQUENCY
from models.diagnostics import SelectionDiagnostics, SplitDiagnostics
from models.exercise import Equipment, Exercise
from models.program import TrainingFocus, WorkoutProgram


class GenerationInput(BaseModel):
    """User request driving a single generation call."""

    model_config = ConfigDict(frozen=True)

    frequency: int = Field(
        ge=MIN_FREQUENCY,
        le=MAX_FREQUENCY,
        description="Training sessions per week",
    )
    equipment: List[Equipment] = Field(
        default_factory=lambda: [Equipment.BODYWEIGHT],
        description="Available equipment tags",
    )
    focus: TrainingFocus = TrainingFocus.BALANCED

    @field_validator("equipment", mode="before")
    @classmethod
    def dedupe_equipment(cls, v: Any) -> Any:
        """Drop repeated tags while keeping the caller's order."""
        if not isinstance(v, list):
            return v
        seen = []
        for item in v:
            if item not in seen:
                seen.append(item)
        return seen


class SelectExercisesRequest(BaseModel):
    """Request model for the initial exercise selection."""

    frequency: int = Field(ge=MIN_FREQUENCY, le=MAX_FREQUENCY)
    equipment: List[Equipment] = Field(default_factory=lambda: [Equipment.BODYWEIGHT])


class SelectExercisesResponse(BaseModel):
    """Response model for the initial exercise selection."""

    exercises: List[Exercise]
    diagnostics: SelectionDiagnostics


class GenerateProgramRequest(GenerationInput):
    """Request model for generating a program."""

    exercise_ids: Optional[List[int]] = Field(
        None,
        description="Custom exercise pool. Omit to select automatically from the catalog.",
    )

    def to_input(self) -> GenerationInput:
        return GenerationInput(
            frequency=self.frequency,
            equipment=self.equipment,
            focus=self.focus,
        )


class GenerateProgramResponse(BaseModel):
    """Response model for a generated program."""

    program: WorkoutProgram
    diagnostics: SplitDiagnostics
    session_volumes: List[int] = Field(
        default_factory=list,
        description="Suggested weekly sets per muscle, split across sessions",
    )
