"""
Exercises router for catalog lookup.

This router provides endpoints for:
- Listing catalog exercises, filtered by equipment and muscle group
- Looking up a single exercise by ID
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import BaseModel, Field

from api.deps import get_exercise_repo
from application.ports import ExerciseRepository
from models.exercise import Equipment, Exercise, MuscleGroup
from services.exercise_selector import (
    filter_by_equipment,
    filter_by_muscle_group,
    order_exercises,
)

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


# =============================================================================
# Response Models
# =============================================================================


class ExerciseListResponse(BaseModel):
    """Response model for list of exercises."""
    exercises: List[Exercise]
    count: int = Field(..., description="Number of exercises returned")


# =============================================================================
# Lookup Endpoints
# =============================================================================


@router.get("", response_model=ExerciseListResponse)
def list_exercises(
    equipment: Optional[List[Equipment]] = Query(
        None, description="Available equipment; bodyweight exercises are always included"
    ),
    muscle: Optional[MuscleGroup] = Query(None, description="Filter by primary muscle group"),
    include_secondary: bool = Query(
        False, description="Also match exercises that work the muscle as a secondary group"
    ),
    repo: ExerciseRepository = Depends(get_exercise_repo),
) -> ExerciseListResponse:
    """
    List catalog exercises with optional filters.

    Filters can be combined (AND logic). Results are ordered compounds first,
    then alphabetically.
    """
    if muscle is not None and include_secondary:
        exercises = filter_by_muscle_group(repo.get_all(), muscle)
    elif muscle is not None:
        exercises = repo.get_by_primary_muscle(muscle)
    else:
        exercises = repo.get_all()

    if equipment is not None:
        exercises = filter_by_equipment(exercises, equipment)

    exercises = order_exercises(exercises)
    return ExerciseListResponse(exercises=exercises, count=len(exercises))


@router.get("/{exercise_id}", response_model=Exercise)
def get_exercise(
    exercise_id: int = Path(..., ge=1, description="Catalog exercise ID"),
    repo: ExerciseRepository = Depends(get_exercise_repo),
) -> Exercise:
    """Get a catalog exercise by ID."""
    exercise = repo.get_by_id(exercise_id)
    if exercise is None:
        raise HTTPException(status_code=404, detail=f"Exercise {exercise_id} not found")
    return exercise
