"""
Plain-text tables for the split planner CLI.

Every function prints to stdout. Section banners are bolded when stdout is
a terminal.
"""

import sys
from typing import Dict, List, Sequence, Tuple

from models.diagnostics import OrderingReason, SelectionDiagnostics, SplitDiagnostics
from models.exercise import Exercise
from models.program import ProgramSession

COLUMN_SEPARATOR = " │ "


# ANSI color codes
class Colors:
    RESET = '\033[0m'
    YELLOW = '\033[93m'
    BOLD = '\033[1m'


def _color(code: str) -> str:
    return code if sys.stdout.isatty() else ""


def pad(value: str, width: int) -> str:
    """Left-align a cell, truncating values wider than the column."""
    if len(value) >= width:
        return value[:width]
    return value + " " * (width - len(value))


def build_row(cells: Sequence[str], widths: Sequence[int]) -> str:
    return COLUMN_SEPARATOR.join(pad(cell, width) for cell, width in zip(cells, widths))


def build_divider(widths: Sequence[int]) -> str:
    return "─┼─".join("─" * width for width in widths)


def print_section(title: str) -> None:
    line = "═" * max(12, len(title) + 4)
    print(line)
    print(f"{_color(Colors.BOLD)} {title} {_color(Colors.RESET)}")
    print(line)


def _exercise_type(exercise_is_compound: bool) -> str:
    return "Compound" if exercise_is_compound else "Isolation"


def print_selection_table(diagnostics: SelectionDiagnostics) -> None:
    """Print why each exercise was picked by the initial selection."""
    print_section("INITIAL EXERCISE SELECTION")
    print(f"Available after equipment filter: {diagnostics.filtered_by_equipment}")
    muscles = ", ".join(m.value for m in diagnostics.relevant_muscles)
    print(f"Relevant muscles: {muscles or 'None'}")
    print("")

    headers = ["#", "Exercise", "Primary", "Equipment", "Type", "Why Selected"]
    widths = [3, 28, 10, 12, 9, 40]
    print(build_row(headers, widths))
    print(build_divider(widths))

    for index, reason in enumerate(diagnostics.reasons, start=1):
        cells = [
            str(index),
            reason.exercise_name,
            reason.primary_muscle.value,
            reason.equipment.value if reason.equipment else "Bodyweight",
            _exercise_type(reason.is_compound),
            reason.reason,
        ]
        print(build_row(cells, widths))

    print("")


def print_plan_table(
    diagnostics: SplitDiagnostics,
    sessions: Sequence[ProgramSession],
) -> None:
    """Print the assignment trace followed by a per-day summary."""
    print_section("PLAN GENERATION")

    # Final position of each exercise on each day
    ordering: Dict[Tuple[int, int], OrderingReason] = {
        (item.exercise_id, item.session_index): item for item in diagnostics.ordering
    }

    headers = ["Exercise", "Primary", "Assigned To", "Order", "Why This Day", "Why This Order"]
    widths = [26, 10, 16, 5, 30, 28]
    print(build_row(headers, widths))
    print(build_divider(widths))

    for assignment in diagnostics.assignments:
        order_info = ordering.get((assignment.exercise_id, assignment.assigned_session_index))
        cells = [
            assignment.exercise_name,
            assignment.primary_muscle.value,
            assignment.assigned_session_name,
            str(order_info.order) if order_info else "-",
            f"[{assignment.stage.value}] {assignment.reason}",
            order_info.reason if order_info else "-",
        ]
        print(build_row(cells, widths))

    print("")
    print_day_summary(sessions)

    if diagnostics.unassigned:
        print("Unassigned exercises:")
        for exercise in diagnostics.unassigned:
            print(f"- {exercise.name}")
        print("")

    if diagnostics.missing_muscle_groups:
        missing = ", ".join(m.value for m in diagnostics.missing_muscle_groups)
        print(f"{_color(Colors.YELLOW)}Missing coverage: {missing}{_color(Colors.RESET)}")
        print("")


def print_day_summary(sessions: Sequence[ProgramSession]) -> None:
    print_section("DAY SUMMARY")
    for session in sessions:
        print(f"{session.name} (Day {session.day_of_week})")
        for item in sorted(session.exercises, key=lambda e: e.order):
            print(
                f"  {item.order}. {item.exercise.name} "
                f"- {item.sets} x {item.reps_min}-{item.reps_max}"
            )
        print("")


def print_available_exercises(exercises: Sequence[Exercise]) -> None:
    print_section("AVAILABLE EXERCISES")
    headers = ["Exercise", "Primary", "Secondary", "Equipment", "Type"]
    widths = [28, 10, 22, 12, 9]
    print(build_row(headers, widths))
    print(build_divider(widths))

    for exercise in exercises:
        cells = [
            exercise.name,
            exercise.primary_muscle.value,
            ", ".join(m.value for m in exercise.secondary_muscles) or "-",
            exercise.equipment_label,
            _exercise_type(exercise.is_compound),
        ]
        print(build_row(cells, widths))
    print("")


def print_exercise_list(exercises: List[Exercise]) -> None:
    """Numbered list of the current working selection."""
    for index, exercise in enumerate(exercises, start=1):
        print(
            f"{index}. {exercise.name} "
            f"({exercise.primary_muscle.value}, {_exercise_type(exercise.is_compound)})"
        )
    print("")
