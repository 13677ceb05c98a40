"""
Unit tests for the split planner CLI and its table formatter.
"""

import pytest

from backend.cli import InteractiveSession, main, parse_equipment, parse_focus
from backend.formatter import (
    build_divider,
    build_row,
    pad,
    print_available_exercises,
    print_section,
)
from models.exercise import Equipment, MuscleGroup
from models.program import TrainingFocus
from services.program_generator import ProgramGenerator
from tests.fakes import make_exercise, make_input


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def session(exercise_repo, capsys):
    """Interactive session over the fake catalog with a fresh selection."""
    interactive = InteractiveSession(ProgramGenerator(exercise_repo), make_input(3))
    interactive.run_selection()
    capsys.readouterr()
    return interactive


def scripted(lines):
    """read_line replacement that raises EOFError once lines run out."""
    remaining = list(lines)

    def read_line(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read_line


# ---------------------------------------------------------------------------
# Argument Parsing Tests
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestParsing:
    """Tests for equipment and focus parsing."""

    def test_equipment_case_insensitive(self):
        assert parse_equipment("barbell, DUMBBELL") == [Equipment.BARBELL, Equipment.DUMBBELL]

    def test_empty_equipment_defaults_to_bodyweight(self):
        assert parse_equipment(" , ") == [Equipment.BODYWEIGHT]

    def test_unknown_equipment(self):
        with pytest.raises(ValueError, match="Unknown equipment"):
            parse_equipment("Kettlebell")

    def test_focus(self):
        assert parse_focus("endurance") == TrainingFocus.ENDURANCE

    def test_unknown_focus(self):
        with pytest.raises(ValueError):
            parse_focus("Power")


# ---------------------------------------------------------------------------
# Command Tests
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestCommands:
    """Tests for the non-interactive subcommands."""

    def test_select(self, capsys):
        main(["select", "--frequency", "3", "--equipment", "bodyweight"])

        out = capsys.readouterr().out
        assert "Frequency: 3 days" in out
        assert "INITIAL EXERCISE SELECTION" in out
        assert "Push-ups" in out

    def test_plan_with_ids(self, capsys):
        main(["plan", "-n", "2", "-e", "Barbell", "--ids", "1,18"])

        out = capsys.readouterr().out
        assert "PLAN GENERATION" in out
        assert "Full Body 1 (Day 1)" in out
        assert "1. Bench Press - 3 x 8-12" in out
        assert "Suggested sets per muscle per session: 8, 8" in out

    def test_plan_with_names(self, capsys):
        main(["plan", "-n", "4", "-e", "Barbell", "--focus", "strength",
              "--exercises", "Bench Press,Squat,Deadlift,Barbell Row"])

        out = capsys.readouterr().out
        assert "Upper Body A (Day 1)" in out
        assert "5 x 3-5" in out

    def test_plan_with_automatic_selection(self, capsys):
        main(["plan", "-n", "5", "-e", "Barbell,Dumbbell,Cables,Machines"])

        out = capsys.readouterr().out
        assert "INITIAL EXERCISE SELECTION" in out
        assert "Lower Day (Day 6)" in out

    def test_available(self, capsys):
        main(["available", "-e", "Bands"])

        out = capsys.readouterr().out
        assert "AVAILABLE EXERCISES" in out
        assert "Pull-ups" in out

    def test_unknown_id_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["plan", "--ids", "999"])

        assert exc_info.value.code == 1
        assert "Error: Unknown exercise(s): 999" in capsys.readouterr().err

    def test_invalid_frequency_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["select", "--frequency", "9"])

        assert exc_info.value.code == 1
        assert "Error: Invalid input" in capsys.readouterr().err

    def test_missing_catalog_exits(self, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["select", "--catalog", str(tmp_path / "nope.yaml")])

        assert exc_info.value.code == 1
        assert "Exercise catalog not found" in capsys.readouterr().err

    def test_invalid_equipment_is_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["select", "--equipment", "Kettlebell"])

        assert exc_info.value.code == 2

    def test_no_command_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 1
        assert "select" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Interactive Session Tests
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestInteractiveSession:
    """Tests for the interactive selection editor."""

    def test_initial_selection(self, session):
        assert [ex.name for ex in session.selected] == [
            "Push-ups", "Pull-ups", "Lunges", "Pike Push-ups", "Tricep Dips",
        ]

    def test_list(self, session, capsys):
        session.handle("list")

        assert "1. Push-ups (Chest, Compound)" in capsys.readouterr().out

    def test_remove_by_number_and_name(self, session, capsys):
        session.handle("remove 1")
        session.handle("remove lunges")

        out = capsys.readouterr().out
        assert "Removed: Push-ups" in out
        assert "Removed: Lunges" in out
        assert [ex.name for ex in session.selected] == [
            "Pull-ups", "Pike Push-ups", "Tricep Dips",
        ]

    def test_remove_errors(self, session, capsys):
        session.handle("remove")
        session.handle("remove 42")
        session.handle("remove Squat")

        out = capsys.readouterr().out
        assert "Provide an exercise number or name." in out
        assert "No exercise at that index." in out
        assert "Exercise not found in current list." in out

    def test_add(self, session, capsys):
        session.handle("add plank")
        session.handle("add Plank")
        session.handle("add Zercher Squat")

        out = capsys.readouterr().out
        assert "Added: Plank" in out
        assert "Exercise already in list." in out
        assert "Exercise not found in catalog." in out
        assert session.selected[-1].name == "Plank"

    def test_set_fields(self, session, capsys):
        session.handle("set focus strength")
        session.handle("set equipment barbell,dumbbell")
        session.handle("set frequency 5")

        assert session.generation_input.focus == TrainingFocus.STRENGTH
        assert session.generation_input.equipment == [Equipment.BARBELL, Equipment.DUMBBELL]
        assert session.generation_input.frequency == 5
        assert "Bench Press" in [ex.name for ex in session.selected]

    def test_set_rejects_invalid_values(self, session, capsys):
        session.handle("set frequency 9")
        session.handle("set focus Power")
        session.handle("set colour blue")
        session.handle("set frequency")

        out = capsys.readouterr().out
        assert "Invalid frequency" in out
        assert "Invalid focus" in out
        assert "Unknown field" in out
        assert "Usage: set" in out
        assert session.generation_input.frequency == 3

    def test_done_prints_plan(self, session, capsys):
        session.handle("done")

        out = capsys.readouterr().out
        assert "PLAN GENERATION" in out
        assert "Full Body 3 (Day 5)" in out

    def test_available_and_help(self, session, capsys):
        session.handle("available")
        session.handle("help")
        session.handle("dance")

        out = capsys.readouterr().out
        assert "Available exercises: 6" in out
        assert "Commands:" in out
        assert "Unknown command" in out

    def test_exit_stops_loop(self, session):
        assert session.handle("exit") is False
        assert session.handle("   ") is True

    def test_run_until_eof(self, session, capsys):
        session.run(read_line=scripted(["remove 1", "list"]))

        out = capsys.readouterr().out
        assert "Type 'help' for commands." in out
        assert "1. Pull-ups (Back, Compound)" in out

    def test_run_until_exit(self, session, capsys):
        session.run(read_line=scripted(["exit", "remove 1"]))

        assert len(session.selected) == 5


# ---------------------------------------------------------------------------
# Formatter Tests
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestFormatter:
    """Tests for table helpers."""

    def test_pad_truncates_and_fills(self):
        assert pad("abcdef", 3) == "abc"
        assert pad("ab", 4) == "ab  "

    def test_row_and_divider(self):
        assert build_row(["a", "bb"], [2, 3]) == "a  │ bb "
        assert build_divider([2, 3]) == "───┼────"

    def test_section_banner(self, capsys):
        print_section("DAY SUMMARY")

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "═" * 15
        assert lines[1].strip() == "DAY SUMMARY"

    def test_available_table_lists_secondary_muscles(self, capsys):
        bench = make_exercise(
            1, "Bench Press",
            [MuscleGroup.CHEST, MuscleGroup.SHOULDERS, MuscleGroup.ARMS],
            priority=1, equipment=Equipment.BARBELL,
        )
        plank = make_exercise(2, "Plank", [MuscleGroup.CORE], priority=4)

        print_available_exercises([bench, plank])

        lines = capsys.readouterr().out.splitlines()
        bench_row = next(line for line in lines if line.startswith("Bench Press"))
        plank_row = next(line for line in lines if line.startswith("Plank"))
        assert "Shoulders, Arms" in bench_row
        assert "Barbell" in bench_row
        assert plank_row.split(" │ ")[2].strip() == "-"
        assert "Bodyweight" in plank_row
