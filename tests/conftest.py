"""Shared fixtures: a fresh SQLite database per test and an API client."""

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from geo_user_api.app.core.config import settings
from geo_user_api.app.core.db import init_db
from geo_user_api.app.main import app
from tests.utils import API, user_payload


@pytest.fixture
def database(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "test.db"))
    init_db()
    return tmp_path / "test.db"


@pytest.fixture
def client(database):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Register a user through the API and return the response ``data``."""

    def _register(**overrides: Any) -> Dict[str, Any]:
        response = client.post(f"{API}/register", json=user_payload(**overrides))
        assert response.status_code == 200, response.text
        return response.json()["data"]

    return _register


@pytest.fixture
def auth_headers(register):
    data = register(email="caller@example.com")
    return {"Authorization": f"Bearer {data['token']}"}
