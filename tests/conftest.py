# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from fastapi.testclient import TestClient
from typing import Generator

from main import create_app
from core.rate_limiter import reset_rate_limits
from core.sessions import SessionRegistry
from core.store import EntityStore


MANAGER_EMAIL = "sindico@email.com"
RESIDENT_EMAIL = "ana@email.com"        # r1, condo c1
OTHER_RESIDENT_EMAIL = "beto@email.com"  # r2, condo c1


@pytest.fixture
def store() -> EntityStore:
    """A freshly seeded store (no HTTP involved)."""
    return EntityStore.seeded()


@pytest.fixture
def sessions(store) -> SessionRegistry:
    return SessionRegistry(store)


@pytest.fixture(scope="function")
def app():
    """Create a test FastAPI application instance with its own seeded store."""
    return create_app(store=EntityStore.seeded())


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def login(client):
    """Log in through the API and return the bearer headers."""
    def _login(email: str) -> dict:
        response = client.post("/auth/login", json={"email": email, "password": "x"})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}
    return _login


@pytest.fixture
def manager_headers(login):
    return login(MANAGER_EMAIL)


@pytest.fixture
def resident_headers(login):
    return login(RESIDENT_EMAIL)


@pytest.fixture(autouse=True)
def reset_limits():
    """Reset rate limits before each test."""
    reset_rate_limits()
    yield
    reset_rate_limits()
