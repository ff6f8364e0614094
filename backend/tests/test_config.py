"""
Notes API — Settings Tests
============================

What:  Validation and derived values of notes_api.config.Settings.
"""

import pytest
from pydantic import ValidationError

from notes_api.config import Settings


class TestSettings:

    def test_defaults(self):
        s = Settings(_env_file=None, environment="development", storage_backend="memory")

        assert s.is_development
        assert s.cors_origins_list == ["http://localhost:4200"]
        assert s.is_sqlite

    def test_values_are_normalized(self):
        s = Settings(_env_file=None, environment="PRODUCTION", storage_backend="Database", log_level="debug")

        assert s.environment == "production"
        assert s.storage_backend == "database"
        assert s.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "field, value",
        [("environment", "prod"), ("storage_backend", "redis"), ("log_level", "verbose")],
    )
    def test_invalid_values_rejected(self, field, value):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: value})

    def test_cors_origins_split(self):
        s = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")

        assert s.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_production_rejects_memory_store(self):
        s = Settings(_env_file=None, environment="production", storage_backend="memory")

        with pytest.raises(ValueError, match="STORAGE_BACKEND"):
            s.validate_required_for_production()

    def test_production_rejects_sqlite(self):
        s = Settings(
            _env_file=None,
            environment="production",
            storage_backend="database",
            database_url="sqlite+aiosqlite:///./notes.db",
        )

        with pytest.raises(ValueError, match="SQLite"):
            s.validate_required_for_production()

    def test_production_accepts_server_database(self):
        s = Settings(
            _env_file=None,
            environment="production",
            storage_backend="database",
            database_url="postgresql+asyncpg://notes:secret@db:5432/notes",
        )

        s.validate_required_for_production()

    def test_development_skips_production_checks(self):
        s = Settings(_env_file=None, environment="development", storage_backend="memory")

        s.validate_required_for_production()
