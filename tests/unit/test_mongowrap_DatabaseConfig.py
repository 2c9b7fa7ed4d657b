"""Unit tests for mongowrap.DatabaseConfig module."""

import pytest
from pydantic import ValidationError

from mongowrap.DatabaseConfig import DatabaseConfig


class TestDatabaseConfig:
    def test_mongo(self):
        config = DatabaseConfig.model_validate(
            {"type": "mongo", "data": {"uri": "mongodb://localhost:27017/", "server_selection_timeout_ms": 250}}
        )
        assert config.type == "mongo"
        assert config.uri == "mongodb://localhost:27017/"
        assert config.data.server_selection_timeout_ms == 250  # type: ignore[attr-defined]

    def test_mongo_defaults(self):
        config = DatabaseConfig.model_validate({"type": "mongo", "data": {}})
        assert config.uri is None
        assert config.data.server_selection_timeout_ms == 5000  # type: ignore[attr-defined]

    def test_data_may_be_omitted(self):
        config = DatabaseConfig.model_validate({"type": "mongomock"})
        assert config.uri == "mongodb://localhost"

    def test_mongo_rejects_bad_uri(self):
        with pytest.raises(ValidationError, match="must start with 'mongodb://'"):
            DatabaseConfig.model_validate({"type": "mongo", "data": {"uri": "http://localhost"}})

    def test_mongo_rejects_non_positive_timeout(self):
        with pytest.raises(ValidationError):
            DatabaseConfig.model_validate({"type": "mongo", "data": {"server_selection_timeout_ms": 0}})

    def test_mongo_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            DatabaseConfig.model_validate({"type": "mongo", "data": {"host": "localhost"}})

    def test_invalid_data_type(self):
        with pytest.raises(ValueError, match="database config must be a dict"):
            DatabaseConfig.model_validate("invalid")

    def test_missing_type(self):
        with pytest.raises(ValueError, match=r"database\.type is required"):
            DatabaseConfig.model_validate({"data": {}})

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown backend type: 'redis'"):
            DatabaseConfig.model_validate({"type": "redis", "data": {}})

    def test_null_data(self):
        with pytest.raises(ValueError, match=r"database\.data must be a dict"):
            DatabaseConfig.model_validate({"type": "mongo", "data": None})

    def test_model_dump_serializes_data(self):
        config = DatabaseConfig.model_validate({"type": "mongomock", "data": {"uri": "mongodb://mock"}})
        assert config.model_dump() == {"type": "mongomock", "data": {"uri": "mongodb://mock"}}
