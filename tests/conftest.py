"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from trainweek.config import Settings
from trainweek.db import InMemoryUserRepository, InMemoryWorkoutDayRepository
from trainweek.schemas import UserCreate
from trainweek.services import UsersService, WorkoutDaysService
from trainweek.web import create_app


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def workout_day_repo():
    return InMemoryWorkoutDayRepository()


@pytest.fixture
def users_service(user_repo):
    return UsersService(user_repo)


@pytest.fixture
def workout_days_service(workout_day_repo, user_repo):
    return WorkoutDaysService(workout_day_repo, user_repo)


@pytest.fixture
def pedro():
    """Create payload for a sample user."""
    return UserCreate(name="Pedro Silva", email="pedro@email.com", age=32)


@pytest.fixture
def client():
    """API client backed by in-memory storage."""
    app = create_app(Settings(storage="memory", log_level="WARNING"))
    with TestClient(app) as test_client:
        yield test_client
