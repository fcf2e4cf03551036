"""Tests for the /roles API endpoints."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from rolesync.roles.factory import set_role_manager
from rolesync.roles.registrar import RoleRegistrar


@pytest.fixture
def registrar(memory_host):
    manager = RoleRegistrar(store=memory_host, backend=memory_host)
    set_role_manager(manager)
    return manager


@pytest.fixture
def client(registrar):
    """Create a test client bound to an in-memory role manager."""
    from api.main import app

    return TestClient(app, raise_server_exceptions=False)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_health_reports_normalised_backend(client, monkeypatch):
    monkeypatch.setenv("ROLESYNC_BACKEND", " Postgres ")
    monkeypatch.setenv("DATABASE_URL", "postgresql://fake")

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["backend"] == "postgres"


def test_list_roles_empty(client):
    response = client.get("/roles")

    assert response.status_code == 200
    assert response.json() == {"roles": [], "count": 0}


def test_list_roles_registration_order(client, registrar):
    registrar.register("b", "Bee", "editor")
    registrar.register("a", "Ay")

    data = client.get("/roles").json()

    assert data["count"] == 2
    assert data["roles"] == [
        {"name": "b", "display_name": "Bee", "template": "editor"},
        {"name": "a", "display_name": "Ay", "template": None},
    ]


def test_get_host_role(client):
    response = client.get("/roles/host/subscriber")

    assert response.status_code == 200
    assert response.json() == {"name": "subscriber", "display_name": "Subscriber", "capabilities": {"read": True}}


def test_get_host_role_not_found(client):
    response = client.get("/roles/host/nobody")

    assert response.status_code == 404
    assert "nobody" in response.json()["detail"]


def test_activate_then_deactivate(client, memory_host):
    response = client.post("/roles/activate")

    assert response.status_code == 200
    assert response.json() == {"applied": ["content_manager", "content_editor"], "count": 2}
    host_role = client.get("/roles/host/content_manager").json()
    assert host_role["capabilities"] == memory_host.get_role("editor").capabilities

    response = client.post("/roles/deactivate")

    assert response.status_code == 200
    assert response.json()["removed"] == ["content_manager", "content_editor"]
    assert client.get("/roles/host/content_manager").status_code == 404


def test_activate_host_failure_returns_500(client, memory_host):
    with patch.object(memory_host, "add_role", side_effect=PermissionError("denied")):
        response = client.post("/roles/activate")

    assert response.status_code == 500
    assert response.json()["error"] == "internal_server_error"
