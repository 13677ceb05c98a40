"""
Program generation router.

This router provides endpoints for split generation:
- Preview the automatic exercise selection
- Generate a weekly program from the catalog or a custom exercise list
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_program_generator
from application.exceptions import UnknownExerciseError
from models.generation import (
    GenerateProgramRequest,
    GenerateProgramResponse,
    SelectExercisesRequest,
    SelectExercisesResponse,
)
from services.program_generator import ProgramGenerator

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/generate",
    tags=["Generation"],
)


@router.post("/selection", response_model=SelectExercisesResponse)
def select_exercises(
    request: SelectExercisesRequest,
    generator: ProgramGenerator = Depends(get_program_generator),
):
    """
    Preview the exercises that automatic selection would pick.

    Exercises are filtered by equipment, then the top entries per muscle
    group targeted by the split are taken, compounds first.

    Raises:
        HTTPException 500: If selection fails
    """
    logger.info(
        f"Select exercises request: frequency={request.frequency}, "
        f"equipment={[e.value for e in request.equipment]}"
    )

    try:
        result = generator.select(request.equipment, request.frequency)
    except Exception as e:
        logger.exception(f"Unexpected error during exercise selection: {e}")
        raise HTTPException(
            status_code=500,
            detail="An unexpected error occurred during exercise selection",
        )

    return SelectExercisesResponse(
        exercises=result.selected,
        diagnostics=result.diagnostics,
    )


@router.post("", response_model=GenerateProgramResponse)
def generate_program(
    request: GenerateProgramRequest,
    generator: ProgramGenerator = Depends(get_program_generator),
):
    """
    Generate a weekly training program.

    1. **Selection**: Picks exercises for the available equipment, or uses
       the supplied ``exercise_ids``.

    2. **Distribution**: Splits them across the week (Full Body, Upper/Lower
       or Push/Pull/Legs depending on frequency).

    3. **Ordering**: Compounds first within every session, with the sets
       and reps of the chosen focus.

    Args:
        request: Generation parameters including:
            - frequency: Sessions per week (2-5)
            - equipment: Available equipment
            - focus: Balanced, Strength or Endurance
            - exercise_ids: Optional custom exercise pool

    Returns:
        Generated program with assignment diagnostics and session volumes

    Raises:
        HTTPException 404: If a custom exercise ID is unknown
        HTTPException 500: If generation fails
    """
    logger.info(
        f"Generate program request: frequency={request.frequency}, "
        f"focus={request.focus.value}, custom_pool={request.exercise_ids is not None}"
    )

    try:
        return generator.generate(request.to_input(), exercise_ids=request.exercise_ids)

    except UnknownExerciseError as e:
        logger.warning(f"Program generation rejected: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(f"Unexpected error during program generation: {e}")
        raise HTTPException(
            status_code=500,
            detail="An unexpected error occurred during program generation",
        )
