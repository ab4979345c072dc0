"""Integration tests for the composition root.

These tests verify that configuration loads and validates, and that the
adapters are selected according to it.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from staffsync.adapters.bus.http import HttpBus
from staffsync.adapters.bus.stdout import StdoutBus
from staffsync.adapters.store.postgresql import PostgreSQLDatabase
from staffsync.adapters.store.sqlite import SQLiteDatabase
from staffsync.config import load_settings
from staffsync.main import build_bus, build_database


class TestConfigurationLoading:
    """Test configuration loading and validation."""

    def test_load_settings_with_defaults(self) -> None:
        settings = load_settings()
        assert settings.store_backend == "sqlite"
        assert settings.bus_backend == "stdout"
        assert settings.log_level == "INFO"
        assert settings.log_format == "text"

    def test_load_settings_from_env(self) -> None:
        with patch.dict(
            os.environ,
            {
                "STORE_BACKEND": "postgresql",
                "DATABASE_URL": "postgresql://alice:pw@db.local:6543/hr",
                "LOG_LEVEL": "DEBUG",
            },
        ):
            settings = load_settings()
            assert settings.store_backend == "postgresql"
            assert settings.log_level == "DEBUG"

    def test_load_settings_from_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / "test.env"
        env_file.write_text("STORE_SQLITE_PATH=/tmp/other.db\n")

        settings = load_settings(str(env_file))

        assert settings.store_sqlite_path == "/tmp/other.db"

    def test_http_bus_requires_url(self) -> None:
        with patch.dict(os.environ, {"BUS_BACKEND": "http", "BUS_HTTP_URL": ""}):
            with pytest.raises(Exception):  # ValidationError
                load_settings()

    def test_bus_timeout_must_be_positive(self) -> None:
        with patch.dict(os.environ, {"BUS_HTTP_TIMEOUT_SECONDS": "0"}):
            with pytest.raises(Exception):  # ValidationError
                load_settings()


class TestAdapterSelection:
    """Test that adapters are correctly instantiated from configuration."""

    def test_sqlite_database(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"STORE_SQLITE_PATH": str(tmp_path / "s.db")}):
            database = build_database(load_settings())

        assert isinstance(database, SQLiteDatabase)
        assert database.db_path == tmp_path / "s.db"

    def test_postgresql_database_from_url(self) -> None:
        with patch.dict(
            os.environ,
            {
                "STORE_BACKEND": "postgresql",
                "DATABASE_URL": "postgresql://alice:pw@db.local:6543/hr",
            },
        ):
            database = build_database(load_settings())

        assert isinstance(database, PostgreSQLDatabase)
        assert database.host == "db.local"
        assert database.port == 6543
        assert database.database == "hr"
        assert database.user == "alice"
        assert database.password == "pw"

    def test_stdout_bus(self) -> None:
        assert isinstance(build_bus(load_settings()), StdoutBus)

    def test_http_bus(self) -> None:
        with patch.dict(
            os.environ,
            {"BUS_BACKEND": "http", "BUS_HTTP_URL": "http://bus.local/messages"},
        ):
            bus = build_bus(load_settings())

        assert isinstance(bus, HttpBus)
        assert bus.url == "http://bus.local/messages"
