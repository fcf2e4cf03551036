"""Shared test fixtures for pytest.

Provides host role stores, registrars and mocks used across multiple test files.
"""

from typing import Iterator
from unittest.mock import Mock

import pytest

from rolesync.roles.factory import reset_role_manager
from rolesync.roles.registrar import RoleRegistrar
from rolesync.storage.memory import InMemoryRoleHost
from rolesync.storage.postgres.config import PostgresConfig
from rolesync.storage.postgres.stores import PostgresRoleHost
from rolesync.types import HostRole


@pytest.fixture(autouse=True)
def _reset_role_manager_state() -> Iterator[None]:
    """Reset the global role manager between tests for isolation."""
    reset_role_manager()
    yield
    reset_role_manager()


@pytest.fixture
def memory_host() -> InMemoryRoleHost:
    """In-memory host seeded with the built-in roles."""
    return InMemoryRoleHost.with_builtin_roles()


@pytest.fixture
def template_host() -> InMemoryRoleHost:
    """Minimal host with a single template role ``T`` = {a, b}."""
    return InMemoryRoleHost([HostRole(name="T", display_name="Template", capabilities={"a": True, "b": True})])


@pytest.fixture
def mock_backend() -> Mock:
    """Backend double recording add_role/remove_role calls."""
    return Mock(spec=["add_role", "remove_role"])


@pytest.fixture
def spy_registrar(template_host: InMemoryRoleHost, mock_backend: Mock) -> RoleRegistrar:
    """Registrar reading from ``template_host`` and writing to ``mock_backend``."""
    return RoleRegistrar(store=template_host, backend=mock_backend)


@pytest.fixture
def sql_host(tmp_path) -> Iterator[PostgresRoleHost]:
    """SQL host on a throwaway SQLite file with the schema created."""
    host = PostgresRoleHost(config=PostgresConfig(database_url=f"sqlite:///{tmp_path / 'roles.db'}"))
    host.create_schema()
    yield host
    host.dispose()
