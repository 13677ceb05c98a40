"""
Pytest fixtures for split planner tests.
"""

import sys
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from api.deps import get_exercise_repo
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeExerciseRepository


# ---------------------------------------------------------------------------
# Repositories
# ---------------------------------------------------------------------------


@pytest.fixture
def exercise_repo() -> FakeExerciseRepository:
    """Fake exercise repository seeded with a small mixed catalog."""
    repo = FakeExerciseRepository()
    repo.seed_default_exercises()
    return repo


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(environment="test", _env_file=None)


@pytest.fixture(scope="session")
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """
    Per-test FastAPI TestClient backed by the bundled YAML catalog.
    """
    yield TestClient(app)


@pytest.fixture
def fake_client(app, exercise_repo) -> Generator[TestClient, None, None]:
    """
    FastAPI TestClient backed by the fake exercise repository.
    Restores the original dependency overrides afterwards.
    """
    app.dependency_overrides[get_exercise_repo] = lambda: exercise_repo
    yield TestClient(app)
    app.dependency_overrides.pop(get_exercise_repo, None)


# ---------------------------------------------------------------------------
# Mock Environment Variables
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set mock environment variables for tests."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    monkeypatch.delenv("EXERCISE_CATALOG_PATH", raising=False)
