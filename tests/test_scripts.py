"""Tests for the command-line scripts and the schema initialiser."""

from __future__ import annotations

import pytest

from db import init_db
from rolesync.roles.factory import set_role_manager
from rolesync.roles.registrar import RoleRegistrar
from rolesync.storage.postgres import PostgresConfig, PostgresRoleHost
from scripts import run_api, sync_roles


def test_sync_roles_add_and_remove(memory_host, capsys):
    set_role_manager(RoleRegistrar(store=memory_host, backend=memory_host))

    assert sync_roles.main(["add"]) == 0
    assert memory_host.get_role("content_manager") is not None
    assert "add: content_manager" in capsys.readouterr().out

    assert sync_roles.main(["remove"]) == 0
    assert memory_host.get_role("content_manager") is None


def test_sync_roles_rejects_unknown_action():
    with pytest.raises(SystemExit):
        sync_roles.main(["purge"])


def test_init_db_requires_database_url(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(SystemExit, match="DATABASE_URL"):
        init_db.main([])


def test_init_db_creates_and_seeds(monkeypatch, tmp_path):
    url = f"sqlite:///{tmp_path / 'roles.db'}"
    monkeypatch.setenv("DATABASE_URL", url)

    assert init_db.main(["--seed"]) == 0

    host = PostgresRoleHost(config=PostgresConfig(database_url=url))
    try:
        assert host.get_role("editor").capabilities["edit_posts"] is True
        assert {r.name for r in host.list_roles()} >= {"administrator", "editor", "subscriber"}
    finally:
        host.dispose()


def test_sync_roles_uses_configured_log_level(memory_host, monkeypatch):
    set_role_manager(RoleRegistrar(store=memory_host, backend=memory_host))
    monkeypatch.setenv("ROLESYNC_LOG_LEVEL", "debug")
    levels = []
    monkeypatch.setattr(sync_roles, "configure_logging", levels.append)

    assert sync_roles.main(["add"]) == 0
    assert levels == ["DEBUG"]


@pytest.mark.parametrize(
    "env",
    [
        {"ROLESYNC_BACKEND": " Postgres "},
        {"ROLESYNC_BACKEND": "ldap"},
    ],
)
def test_run_api_rejects_invalid_settings(monkeypatch, env, capsys):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    for key, value in env.items():
        monkeypatch.setenv(key, value)

    assert run_api.main([]) == 1
    assert "Error:" in capsys.readouterr().err


def test_run_api_starts_uvicorn_with_settings(monkeypatch):
    monkeypatch.setenv("ROLESYNC_BACKEND", " Postgres ")
    monkeypatch.setenv("DATABASE_URL", "postgresql://fake")
    monkeypatch.setenv("ROLESYNC_LOG_LEVEL", "warning")
    calls = []
    monkeypatch.setattr("uvicorn.run", lambda app, **kwargs: calls.append((app, kwargs)))

    assert run_api.main(["--port", "9000"]) == 0

    app, kwargs = calls[0]
    assert app == "api.main:app"
    assert kwargs["port"] == 9000
    assert kwargs["log_level"] == "warning"
