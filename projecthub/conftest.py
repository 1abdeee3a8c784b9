"""
Shared pytest fixtures for the ProjectHub API tests.

Each test gets a fresh InMemoryStore and a temporary upload directory,
injected through app.dependency_overrides.

Run: pytest projecthub -v
"""

import os

# Cheap password hashing for tests; must be set BEFORE importing the app
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")

import pytest
from fastapi.testclient import TestClient

from projecthub.dependencies import get_upload_dir
from projecthub.main import app
from projecthub.store import InMemoryStore, get_store


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def upload_dir(tmp_path):
    # Not created up front: uploads create it lazily
    return tmp_path / "uploads"


@pytest.fixture
def client(store, upload_dir):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_upload_dir] = lambda: str(upload_dir)

    yield TestClient(app)

    app.dependency_overrides.clear()


def register_user(client, email="user@example.com", role="user", name="Test User", password="secret123"):
    """Register through the API and return the JSON body."""
    response = client.post(
        "/api/register",
        json={"name": name, "email": email, "password": password, "role": role},
    )
    assert response.status_code == 201, f"Registration failed: {response.json()}"
    return response.json()


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_token(client):
    return register_user(client, email="user@example.com", role="user")["token"]


@pytest.fixture
def admin_token(client):
    return register_user(client, email="admin@example.com", role="admin", name="Admin")["token"]
