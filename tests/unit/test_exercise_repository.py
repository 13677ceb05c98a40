"""
Unit tests for the YAML exercise catalog.

Tests loading of the bundled catalog and rejection of malformed files.
"""

import pytest

from application.exceptions import CatalogLoadError
from application.ports import ExerciseRepository
from infrastructure.catalog import YamlExerciseRepository
from models.exercise import Equipment, MuscleGroup
from tests.fakes import FakeExerciseRepository


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="module")
def repo():
    return YamlExerciseRepository()


def write_catalog(tmp_path, text):
    path = tmp_path / "exercises.yaml"
    path.write_text(text, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Bundled Catalog Tests
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestBundledCatalog:
    """Tests against the shipped seed data."""

    def test_loads_all_exercises(self, repo):
        exercises = repo.get_all()

        assert len(exercises) == 51
        assert len({ex.id for ex in exercises}) == 51

    def test_every_muscle_group_has_exercises(self, repo):
        for muscle in MuscleGroup:
            assert repo.get_by_primary_muscle(muscle), muscle

    def test_big_lifts_are_high_recovery(self, repo):
        high_recovery = {ex.name for ex in repo.get_all() if ex.is_high_recovery}

        assert {"Bench Press", "Squat", "Deadlift", "Barbell Row"} <= high_recovery

    def test_get_by_id(self, repo):
        assert repo.get_by_id(1).name == "Bench Press"
        assert repo.get_by_id(9999) is None

    def test_get_by_ids_preserves_order_and_skips_unknown(self, repo):
        exercises = repo.get_by_ids([18, 9999, 1])

        assert [ex.name for ex in exercises] == ["Squat", "Bench Press"]

    def test_get_by_name_is_case_insensitive(self, repo):
        assert repo.get_by_name("  bench PRESS ").id == 1
        assert repo.get_by_name("Kettlebell Swing") is None

    def test_get_by_equipment_includes_bodyweight(self, repo):
        exercises = repo.get_by_equipment([Equipment.CABLES])

        equipment = {ex.equipment for ex in exercises}
        assert equipment <= {Equipment.CABLES, Equipment.BODYWEIGHT, None}
        assert Equipment.BODYWEIGHT in equipment

    def test_get_all_returns_copy(self, repo):
        repo.get_all().clear()

        assert len(repo.get_all()) == 51


# ---------------------------------------------------------------------------
# Malformed Catalog Tests
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestCatalogErrors:
    """Tests for CatalogLoadError cases."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogLoadError, match="not found"):
            YamlExerciseRepository(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = write_catalog(tmp_path, "- id: 1\n  name: [unclosed\n")

        with pytest.raises(CatalogLoadError, match="Invalid YAML"):
            YamlExerciseRepository(path)

    def test_root_must_be_list(self, tmp_path):
        path = write_catalog(tmp_path, "exercises: []\n")

        with pytest.raises(CatalogLoadError, match="list of exercises"):
            YamlExerciseRepository(path)

    def test_invalid_entry(self, tmp_path):
        path = write_catalog(
            tmp_path,
            "- id: 1\n  name: Calf Raise\n  muscle_groups: [Calves]\n  priority: 4\n",
        )

        with pytest.raises(CatalogLoadError, match="position 0"):
            YamlExerciseRepository(path)

    def test_duplicate_id(self, tmp_path):
        path = write_catalog(
            tmp_path,
            "- {id: 1, name: Squat, muscle_groups: [Legs], priority: 1}\n"
            "- {id: 1, name: Lunges, muscle_groups: [Legs], priority: 3}\n",
        )

        with pytest.raises(CatalogLoadError, match="Duplicate exercise id"):
            YamlExerciseRepository(path)

    def test_duplicate_name(self, tmp_path):
        path = write_catalog(
            tmp_path,
            "- {id: 1, name: Squat, muscle_groups: [Legs], priority: 1}\n"
            "- {id: 2, name: squat, muscle_groups: [Legs], priority: 1}\n",
        )

        with pytest.raises(CatalogLoadError, match="Duplicate exercise name"):
            YamlExerciseRepository(path)

    def test_empty_file_is_empty_catalog(self, tmp_path):
        path = write_catalog(tmp_path, "")

        assert YamlExerciseRepository(path).get_all() == []


# ---------------------------------------------------------------------------
# Protocol Conformance
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize("implementation", [YamlExerciseRepository, FakeExerciseRepository])
def test_implements_exercise_repository(implementation):
    for method in (
        "get_all", "get_by_id", "get_by_ids", "get_by_name",
        "get_by_equipment", "get_by_primary_muscle",
    ):
        assert callable(getattr(implementation, method, None)), method
    assert hasattr(ExerciseRepository, "get_all")
