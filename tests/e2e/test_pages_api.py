"""End-to-end tests for the page management endpoints."""

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


def login(client):
    response = client.post(
        "/api/login", json={"username": "admin", "password": "s3cret"}
    )
    assert response.status_code == 200


class TestPagesRequireSession:
    """Every page endpoint rejects anonymous callers."""

    def test_list(self, client):
        response = client.get("/api/pages")

        assert response.status_code == 401
        assert response.json() == {"message": "authentication required"}

    def test_create(self, client):
        response = client.post(
            "/api/pages", json={"title": "x", "page_url": "https://x.example.com"}
        )

        assert response.status_code == 401

    def test_forged_cookie(self, client):
        client.cookies.set("auth_token", "forged")

        response = client.get("/api/pages")

        assert response.status_code == 401


class TestPageManagement:
    """CRUD after logging in."""

    def test_create_list_update_delete(self, client):
        login(client)

        created = client.post(
            "/api/pages",
            json={"title": "Draft", "page_url": "https://blog.example.com/draft"},
        )
        assert created.status_code == 201
        page = created.json()
        assert page["published"] is False

        listed = client.get("/api/pages").json()
        assert [p["id"] for p in listed] == [page["id"]]

        updated = client.patch(
            f"/api/pages/{page['id']}",
            json={
                "title": "Final",
                "page_url": "https://blog.example.com/final",
                "published": True,
            },
        )
        assert updated.status_code == 204
        assert client.get("/api/pages").json()[0]["title"] == "Final"

        deleted = client.delete(f"/api/pages/{page['id']}")
        assert deleted.status_code == 204
        assert client.get("/api/pages").json() == []

    def test_delete_removes_comments(self, client):
        login(client)
        page = client.post(
            "/api/pages",
            json={"title": "Doomed", "page_url": "https://blog.example.com/doomed"},
        ).json()
        client.post(
            f"/api/pages/{page['id']}/comments",
            json={"display_name": "Visitor", "content": "hi"},
        )

        client.delete(f"/api/pages/{page['id']}")

        count = client.get(f"/api/pages/{page['id']}/comments_count").json()
        assert count == {"count": 0}

    def test_overlong_title(self, client):
        login(client)

        response = client.post(
            "/api/pages",
            json={"title": "x" * 1001, "page_url": "https://blog.example.com/long"},
        )

        assert response.status_code == 400
