"""Fixtures for exercising the HTTP and websocket API."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient  # noqa: E402

from bookmatch.infrastructure.database import Base, engine, initialize_database  # noqa: E402
from main import create_app  # noqa: E402

DEFAULT_PASSWORD = "secret123"


@pytest.fixture()
def client():
    """Return a test client bound to a clean database."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    with TestClient(create_app()) as test_client:
        yield test_client
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def register(client: TestClient):
    """Return a helper registering a user and returning ``(user, headers, token)``."""

    def _register(username: str, password: str = DEFAULT_PASSWORD):
        response = client.post(
            "/api/auth/register",
            json={"username": username, "email": f"{username}@example.com", "password": password},
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return body["user"], {"Authorization": f"Bearer {body['token']}"}, body["token"]

    return _register
