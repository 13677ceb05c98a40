"""
Sets/reps prescriptions by training focus.

Pure lookups, applied uniformly to every exercise of a generated program.
"""

from typing import Dict, List

from models.program import SetsRepsScheme, TrainingFocus

SETS_REPS_SCHEMES: Dict[TrainingFocus, SetsRepsScheme] = {
    TrainingFocus.BALANCED: SetsRepsScheme(sets=3, reps_min=8, reps_max=12),
    TrainingFocus.STRENGTH: SetsRepsScheme(sets=5, reps_min=3, reps_max=5),
    TrainingFocus.ENDURANCE: SetsRepsScheme(sets=3, reps_min=15, reps_max=20),
}

# Weekly working sets per muscle group
WEEKLY_VOLUME_TARGETS: Dict[TrainingFocus, int] = {
    TrainingFocus.BALANCED: 16,  # Mid-high volume
    TrainingFocus.STRENGTH: 12,  # Moderate volume, higher intensity
    TrainingFocus.ENDURANCE: 14,
}


def get_sets_reps_scheme(focus: TrainingFocus | str) -> SetsRepsScheme:
    """Get the sets/rep range for a training focus."""
    return SETS_REPS_SCHEMES[TrainingFocus(focus)]


def calculate_session_volume(
    focus: TrainingFocus | str,
    sessions_per_week: int,
) -> List[int]:
    """
    Split the weekly per-muscle set target across sessions.

    Leftover sets go to the earliest sessions, e.g. Balanced (16 sets) over
    3 sessions gives [6, 5, 5].

    Args:
        focus: Training focus
        sessions_per_week: Number of sessions to spread over

    Returns:
        Sets per session, one entry per session
    """
    if sessions_per_week < 1:
        raise ValueError("sessions_per_week must be at least 1")

    weekly_volume = WEEKLY_VOLUME_TARGETS[TrainingFocus(focus)]
    base, remainder = divmod(weekly_volume, sessions_per_week)
    return [base + (1 if i < remainder else 0) for i in range(sessions_per_week)]
