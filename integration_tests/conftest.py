"""Pytest configuration for integration tests."""

import pytest
from fastapi.testclient import TestClient

from trainweek.config import Settings
from trainweek.web import create_app


# Mark all tests in this directory as integration tests
def pytest_collection_modifyitems(items):
    """Add integration marker to all tests in this directory."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def sqlite_settings(tmp_path):
    return Settings(storage="sqlite", data_dir=tmp_path, log_level="WARNING")


@pytest.fixture
def sqlite_client(sqlite_settings):
    """API client backed by a fresh SQLite file."""
    app = create_app(sqlite_settings)
    with TestClient(app) as client:
        yield client
