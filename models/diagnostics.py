"""
Diagnostic trace models.

Diagnostics are an informational side channel describing why each exercise
was selected, which day it landed on and where it sits in that day. They
carry no behavioral contract; tooling and the CLI render them as tables.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from models.exercise import Equipment, Exercise, MuscleGroup


class AssignmentPass(str, Enum):
    """Splitter stage that produced an assignment."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    REBALANCE = "rebalance"
    MINIMUM = "minimum"
    SPACING = "spacing"


class AssignmentReason(BaseModel):
    """Why an exercise was placed on (or moved to) a session."""

    exercise_id: int
    exercise_name: str
    primary_muscle: MuscleGroup
    assigned_session_index: int
    assigned_session_name: str
    stage: AssignmentPass
    reason: str


class OrderingReason(BaseModel):
    """Why an exercise sits at its position within a session."""

    exercise_id: int
    exercise_name: str
    session_index: int
    session_name: str
    order: int
    reason: str


class SplitDiagnostics(BaseModel):
    """Assignment trace returned alongside a generated program."""

    assignments: List[AssignmentReason] = []
    ordering: List[OrderingReason] = []
    unassigned: List[Exercise] = []
    missing_muscle_groups: List[MuscleGroup] = []


class SelectionReason(BaseModel):
    """Why an exercise made it into the initial selection."""

    exercise_id: int
    exercise_name: str
    primary_muscle: MuscleGroup
    equipment: Optional[Equipment] = None
    priority: int
    is_compound: bool
    reason: str


class MuscleBreakdown(BaseModel):
    """Per-muscle summary of the initial selection."""

    muscle: MuscleGroup
    candidate_count: int
    selected_names: List[str] = []


class SelectionDiagnostics(BaseModel):
    """Trace of the initial exercise selection."""

    filtered_by_equipment: int = Field(
        description="Exercises left after the equipment filter"
    )
    relevant_muscles: List[MuscleGroup] = []
    reasons: List[SelectionReason] = []
    muscle_breakdown: List[MuscleBreakdown] = []
