"""
Pytest configuration and shared fixtures.

Points the application at a throwaway SQLite database before any app module
is imported, and recreates all tables for every test.
"""

import os
import tempfile
from pathlib import Path

_DB_DIR = tempfile.mkdtemp(prefix="cuemate-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_DB_DIR) / 'test.db'}"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.db.base import Base  # noqa: E402
from app.db.session import engine, init_db, SessionLocal  # noqa: E402
from app.matching.profile import PlayerProfile  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    """Fresh tables for every test."""
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client() -> TestClient:
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_player():
    """Factory for engine-level profiles."""

    def _make(user_id: str, **fields) -> PlayerProfile:
        return PlayerProfile.build(user_id=user_id, **fields)

    return _make


@pytest.fixture
def brisbane_player_payload() -> dict:
    """Profile payload for a mid-level Brisbane billiards player."""
    return {
        "first_name": "Alex",
        "skill_level": 3.0,
        "preferred_location": "Brisbane",
        "preferred_game_types": ["Billiards"],
        "availability": {"Mon": ["Evening"]},
    }


@pytest.fixture
def create_profile(client):
    """Create a profile through the API and return the response JSON."""

    def _create(user_id: str, **fields) -> dict:
        response = client.post("/api/v1/profiles", json={"user_id": user_id, **fields})
        assert response.status_code == 201, response.text
        return response.json()

    return _create
