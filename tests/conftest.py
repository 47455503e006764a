"""
Pytest configuration and fixtures for testing
"""
import httpx
import pytest
from fastapi.testclient import TestClient

from database import InMemoryStore, get_store
from main import app


@pytest.fixture
def store():
    """
    Fixture that provides an isolated, empty store for each test.
    """
    return InMemoryStore()


@pytest.fixture
def client(store):
    """FastAPI TestClient fixture with the store dependency overridden"""
    app.dependency_overrides[get_store] = lambda: store

    with TestClient(app) as test_client:
        yield test_client

    # Cleanup: remove dependency override
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(store):
    """
    Async HTTP client fixture with the store dependency overridden.
    Uses httpx.AsyncClient over an ASGI transport.
    """
    app.dependency_overrides[get_store] = lambda: store

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Register a user over HTTP and return its JSON body"""
    def _register(username="alice", name=None):
        response = client.post("/users", json={"name": name or username.title(), "username": username})
        assert response.status_code == 201, response.text
        return response.json()
    return _register
