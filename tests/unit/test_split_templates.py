"""
Unit tests for split templates.
"""

import pytest

from models.exercise import MuscleGroup
from models.program import SplitType
from services.split_templates import (
    distribute_muscle_groups,
    get_consecutive_day_pairs,
    get_muscle_groups_for_frequency,
    get_split_type,
)


@pytest.mark.unit
class TestSplitType:
    """Tests for frequency to split family mapping."""

    @pytest.mark.parametrize(
        "frequency,expected",
        [
            (2, SplitType.FULL_BODY),
            (3, SplitType.FULL_BODY),
            (4, SplitType.UPPER_LOWER),
            (5, SplitType.PUSH_PULL_LEGS),
        ],
    )
    def test_split_for_frequency(self, frequency, expected):
        assert get_split_type(frequency) == expected

    def test_other_frequencies_fall_back_to_full_body(self):
        assert get_split_type(1) == SplitType.FULL_BODY
        assert len(distribute_muscle_groups(6)) == 6


@pytest.mark.unit
class TestDistributeMuscleGroups:
    """Tests for day template layout."""

    def test_two_day_full_body(self):
        templates = distribute_muscle_groups(2)

        assert [t.name for t in templates] == ["Full Body 1", "Full Body 2"]
        assert [t.day_of_week for t in templates] == [1, 4]
        assert MuscleGroup.CORE not in templates[0].target_muscles

    def test_three_day_full_body(self):
        templates = distribute_muscle_groups(3)

        assert [t.day_of_week for t in templates] == [1, 3, 5]
        for template in templates:
            assert template.target_muscles == (
                MuscleGroup.CHEST,
                MuscleGroup.BACK,
                MuscleGroup.LEGS,
                MuscleGroup.SHOULDERS,
                MuscleGroup.ARMS,
            )

    def test_upper_lower(self):
        templates = distribute_muscle_groups(4)

        assert [t.name for t in templates] == [
            "Upper Body A", "Lower Body A", "Upper Body B", "Lower Body B",
        ]
        assert [t.day_of_week for t in templates] == [1, 2, 4, 5]
        assert templates[1].target_muscles == (MuscleGroup.LEGS,)
        assert templates[2].targets(MuscleGroup.ARMS)
        assert not templates[0].targets(MuscleGroup.ARMS)

    def test_push_pull_legs(self):
        templates = distribute_muscle_groups(5)

        assert [t.name for t in templates] == [
            "Push Day", "Pull Day", "Leg Day", "Upper Day", "Lower Day",
        ]
        assert [t.day_of_week for t in templates] == [1, 2, 3, 5, 6]
        assert templates[4].target_muscles == (MuscleGroup.LEGS, MuscleGroup.CORE)

    def test_templates_are_rebuilt_each_call(self):
        assert distribute_muscle_groups(4) == distribute_muscle_groups(4)
        assert distribute_muscle_groups(4) is not distribute_muscle_groups(4)


@pytest.mark.unit
class TestMuscleGroupsForFrequency:
    """Tests for the union of targeted muscle groups."""

    def test_full_body_excludes_core(self):
        assert get_muscle_groups_for_frequency(3) == [
            MuscleGroup.CHEST,
            MuscleGroup.BACK,
            MuscleGroup.LEGS,
            MuscleGroup.SHOULDERS,
            MuscleGroup.ARMS,
        ]

    def test_push_pull_legs_includes_core_in_canonical_order(self):
        assert get_muscle_groups_for_frequency(5) == list(MuscleGroup)


@pytest.mark.unit
class TestConsecutiveDayPairs:
    """Tests for back-to-back day detection."""

    def test_full_body_has_no_pairs(self):
        assert get_consecutive_day_pairs(distribute_muscle_groups(2)) == []
        assert get_consecutive_day_pairs(distribute_muscle_groups(3)) == []

    def test_upper_lower_pairs(self):
        assert get_consecutive_day_pairs(distribute_muscle_groups(4)) == [(0, 1), (2, 3)]

    def test_push_pull_legs_pairs(self):
        assert get_consecutive_day_pairs(distribute_muscle_groups(5)) == [
            (0, 1), (1, 2), (3, 4),
        ]
