"""Shared pytest configuration and fixtures for all tests."""

import json
import os
import uuid
from collections.abc import Iterator
from pathlib import Path

import pytest

from mongowrap.ConnectionRegistry import ConnectionRegistry
from mongowrap.DatabaseConfig import DatabaseConfig

MONGOMOCK_ADDRESS = "mongodb://localhost"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests against the in-memory backend")
    config.addinivalue_line("markers", "integration: tests against a real MongoDB server")
    config.addinivalue_line("markers", "mongo: requires MONGOWRAP_TEST_MONGO_URI")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def mongomock_config_dict() -> dict:
    """Minimal valid configuration dict using the in-memory backend."""
    return {
        "database": {
            "type": "mongomock",
            "data": {"uri": MONGOMOCK_ADDRESS},
        },
        "log": {"level": "DEBUG"},
    }


def mongomock_database_config() -> DatabaseConfig:
    return DatabaseConfig.model_validate(mongomock_config_dict()["database"])


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def mongowrap_home(tmp_path: Path, monkeypatch) -> Path:
    """Point MONGOWRAP_HOME at a temporary directory holding a valid config file."""
    monkeypatch.setenv("MONGOWRAP_HOME", str(tmp_path))
    (tmp_path / "config.json").write_text(json.dumps(mongomock_config_dict()))
    return tmp_path


@pytest.fixture
def database_name() -> str:
    # mongomock's shared client keeps data between tests; a fresh name isolates them.
    return f"mongowrap_test_{uuid.uuid4().hex[:12]}"


@pytest.fixture
def registry(database_name: str) -> Iterator[ConnectionRegistry]:
    """Connected registry on the mongomock backend; the test database is dropped afterwards."""
    registry = ConnectionRegistry(mongomock_database_config())
    registry.connect(MONGOMOCK_ADDRESS)
    yield registry
    if registry.session is not None:
        registry.session.drop_database(database_name)
    registry.close()


@pytest.fixture
def users_key(registry: ConnectionRegistry, database_name: str) -> str:
    """Registered key for a ``users`` collection in the test database."""
    registry.get_or_create_collection(database_name, "users")
    return f"{database_name}.users"


# =============================================================================
# MongoDB Test Helpers
# =============================================================================


def get_test_mongo_uri() -> str | None:
    return os.environ.get("MONGOWRAP_TEST_MONGO_URI")
