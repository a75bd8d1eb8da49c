"""
pytest configuration and fixtures.
"""

import os
from typing import Generator

# movies_api.main builds a module-level app on import
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from movies_api.core.config import Settings
from movies_api.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite file."""
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'movies.db'}",
        AUTO_CREATE_TABLES=True,
        DB_CONNECT_RETRIES=1,
        DB_CONNECT_RETRY_DELAY=0,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Test client; entering it runs startup, which creates the tables."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def session_factory(app: FastAPI, client: TestClient) -> sessionmaker:
    return app.state.session_factory


@pytest.fixture
def inception() -> dict:
    """Sample movie payload."""
    return {
        "title": "Inception",
        "description": "A thief who steals corporate secrets through dream-sharing.",
        "release_year": 2010,
        "poster": "https://example.com/inception.jpg",
        "director": {"first_name": "Christopher", "last_name": "Nolan"},
    }


@pytest.fixture
def make_movie():
    """Factory building a movie payload with the given director."""
    def _make(title: str, first_name: str = "Christopher", last_name: str = "Nolan", year: int = 2000) -> dict:
        return {
            "title": title,
            "description": f"{title} description",
            "release_year": year,
            "poster": f"/posters/{title.lower().replace(' ', '_')}.jpg",
            "director": {"first_name": first_name, "last_name": last_name},
        }

    return _make
