"""
Shared fixtures for the test suite.

Each test gets its own SQLite database and upload directory under pytest's
``tmp_path`` and a fresh application built with ``create_app(settings)``.
"""

import os

# Must be set before any travel_story module configures its logger
os.environ.setdefault("LOG_TO_FILE", "false")

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from travel_story.config import Settings  # noqa: E402

TEST_SECRET = "test-secret-key"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'travel_story.db'}",
        ACCESS_TOKEN_SECRET=TEST_SECRET,
        BCRYPT_ROUNDS=4,
        UPLOAD_DIR=str(tmp_path / "uploads"),
        PUBLIC_BASE_URL="http://testserver",
        MAX_UPLOAD_SIZE_MB=1,
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    from main import create_app

    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Test client running inside the application's lifespan (tables are created
    on startup).
    """
    with TestClient(app) as c:
        yield c


@pytest.fixture
def register_user(client: TestClient):
    """Returns a helper that posts to /create-account."""

    def _register(full_name: str, email: str, password: str = "secret"):
        return client.post(
            "/create-account",
            json={"fullName": full_name, "email": email, "password": password},
        )

    return _register


@pytest.fixture
def auth_headers(register_user) -> dict[str, str]:
    response = register_user("Ada Lovelace", "ada@example.com")
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}