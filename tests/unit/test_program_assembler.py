"""
Unit tests for the program assembler.
"""

import pytest

from models.exercise import Equipment, MuscleGroup
from models.program import SplitType, TrainingFocus
from services.program_assembler import assemble_program, program_name
from services.split_templates import distribute_muscle_groups
from tests.fakes import make_exercise, make_input


@pytest.fixture
def day():
    return [
        make_exercise(3, "Lateral Raise", [MuscleGroup.SHOULDERS], 5, Equipment.DUMBBELL),
        make_exercise(1, "Bench Press", [MuscleGroup.CHEST], 1, Equipment.BARBELL),
        make_exercise(2, "Push-ups", [MuscleGroup.CHEST], 3),
    ]


@pytest.mark.unit
class TestAssembleProgram:
    """Tests for assemble_program."""

    def test_orders_each_day_compounds_first(self, day):
        program, _ = assemble_program(make_input(2), distribute_muscle_groups(2), [day, []])

        session = program.sessions[0]
        assert [e.exercise.name for e in session.exercises] == [
            "Bench Press", "Push-ups", "Lateral Raise",
        ]
        assert [e.order for e in session.exercises] == [1, 2, 3]
        assert program.sessions[1].exercises == []

    def test_binds_focus_scheme(self, day):
        program, _ = assemble_program(
            make_input(2, focus=TrainingFocus.ENDURANCE),
            distribute_muscle_groups(2),
            [day, day],
        )

        for session in program.sessions:
            for item in session.exercises:
                assert (item.sets, item.reps_min, item.reps_max) == (3, 15, 20)

    def test_program_metadata(self, day):
        templates = distribute_muscle_groups(4)
        program, _ = assemble_program(
            make_input(4), templates, [day, [], [], []], duration_weeks=10
        )

        assert program.name == "Balanced Program (4x/week)"
        assert program.split_type == SplitType.UPPER_LOWER
        assert program.duration_weeks == 10
        assert program.sessions_per_week == 4
        assert [s.name for s in program.sessions] == [t.name for t in templates]
        assert program.sessions[0].primary_muscles == list(templates[0].target_muscles)

    def test_ordering_reasons(self, day):
        _, ordering = assemble_program(make_input(2), distribute_muscle_groups(2), [day, []])

        assert [(o.exercise_name, o.order) for o in ordering] == [
            ("Bench Press", 1), ("Push-ups", 2), ("Lateral Raise", 3),
        ]
        assert ordering[0].reason == "Compound exercises first"
        assert ordering[2].reason == "Isolation after compounds"
        assert ordering[0].session_name == "Full Body 1"

    def test_day_lists_not_mutated(self, day):
        snapshot = list(day)

        assemble_program(make_input(2), distribute_muscle_groups(2), [day, []])

        assert day == snapshot


@pytest.mark.unit
def test_program_name():
    assert program_name(TrainingFocus.STRENGTH, 5) == "Strength Program (5x/week)"
