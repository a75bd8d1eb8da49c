"""
Tests for configuration, database bootstrap and the health endpoint.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

from movies_api.core import config
from movies_api.core.config import Settings, get_settings
from movies_api.db import create_db_engine, wait_for_db
from movies_api.main import create_app
from movies_api.routers import health


class TestSettings:
    """Tests for Settings loading."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DB_STATEMENT_TIMEOUT_MS", "1234")
        monkeypatch.setenv("AUTO_CREATE_TABLES", "true")
        monkeypatch.setenv("PORT", "9000")

        settings = Settings()

        assert settings.DB_STATEMENT_TIMEOUT_MS == 1234
        assert settings.AUTO_CREATE_TABLES is True
        assert settings.PORT == 9000

    def test_get_settings_is_singleton(self, monkeypatch):
        monkeypatch.setattr(config, "_settings", None)

        assert get_settings() is get_settings()


class TestDatabaseBootstrap:
    """Tests for engine creation and startup checks."""

    def test_startup_creates_tables(self, app, client):
        tables = set(inspect(app.state.engine).get_table_names())

        assert {"movies", "directors"} <= tables

    def test_wait_for_db_gives_up(self, tmp_path):
        settings = Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'missing' / 'movies.db'}")
        engine = create_db_engine(settings)

        with pytest.raises(RuntimeError, match="after 2 attempts"):
            wait_for_db(engine, retries=2, delay=0)

    def test_unreachable_database_aborts_startup(self, tmp_path):
        settings = Settings(
            DATABASE_URL=f"sqlite:///{tmp_path / 'missing' / 'movies.db'}",
            DB_CONNECT_RETRIES=1,
            DB_CONNECT_RETRY_DELAY=0,
            LOG_LEVEL="WARNING",
        )
        app = create_app(settings)

        with pytest.raises(RuntimeError):
            with TestClient(app):
                pass


class TestHealth:
    """Tests for GET /health."""

    def test_healthy(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "database": "ok"}

    def test_database_down_returns_503(self, client, monkeypatch):
        def broken(engine):
            raise OperationalError("SELECT 1", {}, Exception("could not connect"))

        monkeypatch.setattr(health, "check_connection", broken)

        response = client.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "error"
