"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from qna.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client over a fresh app with in-memory persistence."""
    app = create_app(build_test_container())
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def logged_in(client):
    """Client carrying the session cookie of a freshly signed-up user."""
    response = client.post(
        "/user/signup",
        json={"username": "alice", "email": "alice@example.com", "password": "pw"},
    )
    assert response.status_code == 201
    return client
