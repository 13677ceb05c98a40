"""
YAML-backed implementation of ExerciseRepository.

Loads the exercise library seed data shipped next to this module (or a
file configured through EXERCISE_CATALOG_PATH) once, validates every entry
against the Exercise model, and serves read-only queries from memory.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import yaml
from pydantic import ValidationError

from application.exceptions import CatalogLoadError
from models.exercise import Equipment, Exercise, MuscleGroup

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "exercises.yaml"


def _normalize_name(name: str) -> str:
    return name.strip().lower()


class YamlExerciseRepository:
    """
    Exercise catalog loaded from a YAML file.

    The file holds a list of mappings with the Exercise fields. IDs and
    names must be unique.
    """

    def __init__(self, path: Optional[Path | str] = None):
        """
        Load and validate the catalog.

        Args:
            path: Catalog file. Defaults to the bundled seed data.

        Raises:
            CatalogLoadError: If the file is missing, malformed or invalid
        """
        self._path = Path(path) if path else DEFAULT_CATALOG_PATH
        self._exercises: List[Exercise] = self._load(self._path)
        self._by_id: Dict[int, Exercise] = {ex.id: ex for ex in self._exercises}
        self._by_name: Dict[str, Exercise] = {
            _normalize_name(ex.name): ex for ex in self._exercises
        }
        logger.info(f"Loaded {len(self._exercises)} exercises from {self._path}")

    @staticmethod
    def _load(path: Path) -> List[Exercise]:
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise CatalogLoadError(f"Exercise catalog not found: {path}") from e
        except yaml.YAMLError as e:
            raise CatalogLoadError(f"Invalid YAML in exercise catalog {path}: {e}") from e

        if raw is None:
            return []
        if not isinstance(raw, list):
            raise CatalogLoadError(
                f"Exercise catalog {path} must contain a list of exercises"
            )

        exercises = []
        seen_ids = set()
        seen_names = set()
        for index, entry in enumerate(raw):
            try:
                exercise = Exercise.model_validate(entry)
            except ValidationError as e:
                raise CatalogLoadError(
                    f"Invalid exercise at position {index} in {path}: {e}"
                ) from e

            name_key = _normalize_name(exercise.name)
            if exercise.id in seen_ids:
                raise CatalogLoadError(f"Duplicate exercise id {exercise.id} in {path}")
            if name_key in seen_names:
                raise CatalogLoadError(f"Duplicate exercise name '{exercise.name}' in {path}")

            seen_ids.add(exercise.id)
            seen_names.add(name_key)
            exercises.append(exercise)

        return exercises

    def get_all(self) -> List[Exercise]:
        return list(self._exercises)

    def get_by_id(self, exercise_id: int) -> Optional[Exercise]:
        return self._by_id.get(exercise_id)

    def get_by_ids(self, exercise_ids: Iterable[int]) -> List[Exercise]:
        return [self._by_id[i] for i in exercise_ids if i in self._by_id]

    def get_by_name(self, name: str) -> Optional[Exercise]:
        return self._by_name.get(_normalize_name(name))

    def get_by_equipment(self, equipment: Iterable[Equipment]) -> List[Exercise]:
        available = list(equipment)
        return [ex for ex in self._exercises if ex.is_available_with(available)]

    def get_by_primary_muscle(self, muscle: MuscleGroup) -> List[Exercise]:
        return [ex for ex in self._exercises if ex.primary_muscle == muscle]
