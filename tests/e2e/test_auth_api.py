"""End-to-end tests for login, session and logout."""

import pytest
from fastapi.testclient import TestClient

from masacarri.config import Settings
from masacarri.interface.api.app import create_app
from tests.di import build_test_container
from tests.harness import seed_user, with_client_address


@pytest.fixture
def client():
    """Anonymous test client; an ``admin`` account exists."""
    container = build_test_container()
    seed_user(container, "admin", "s3cret")
    app = create_app(container=container, settings=Settings())
    with TestClient(with_client_address(app)) as client:
        yield client


class TestAuthFlow:
    """Tests for the cookie session lifecycle."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_login_sets_cookie(self, client):
        response = client.post(
            "/api/login", json={"username": "admin", "password": "s3cret"}
        )

        assert response.status_code == 200
        assert response.json()["username"] == "admin"
        assert "token" not in response.json()
        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith("auth_token=")
        assert "HttpOnly" in set_cookie

    def test_wrong_password(self, client):
        response = client.post(
            "/api/login", json={"username": "admin", "password": "wrong"}
        )

        assert response.status_code == 401
        assert response.json() == {"message": "invalid username or password"}
        assert "set-cookie" not in response.headers

    def test_session_without_cookie(self, client):
        response = client.get("/api/session")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False, "user": None}

    def test_session_after_login(self, client):
        client.post("/api/login", json={"username": "admin", "password": "s3cret"})

        data = client.get("/api/session").json()

        assert data["authenticated"] is True
        assert data["user"]["username"] == "admin"

    def test_logout_clears_cookie(self, client):
        client.post("/api/login", json={"username": "admin", "password": "s3cret"})

        response = client.get("/api/logout")

        assert response.status_code == 204
        assert "auth_token" in response.headers["set-cookie"]
        assert client.get("/api/session").json()["authenticated"] is False

    def test_logout_requires_session(self, client):
        response = client.get("/api/logout")

        assert response.status_code == 401
