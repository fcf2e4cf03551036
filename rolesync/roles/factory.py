"""Process-wide role manager.

The first call to ``get_role_manager()`` builds a registrar from
``RoleSyncSettings.from_env()``; later calls return the same instance.
"""

from __future__ import annotations

import logging
import threading

from rolesync.config import RoleSyncSettings
from rolesync.persistence.interfaces import RoleHost
from rolesync.roles.registrar import RoleRegistrar
from rolesync.storage.memory import InMemoryRoleHost
from rolesync.storage.postgres.config import PostgresConfig
from rolesync.storage.postgres.stores import PostgresRoleHost

logger = logging.getLogger(__name__)

_manager: RoleRegistrar | None = None
_manager_lock = threading.Lock()


def build_host(settings: RoleSyncSettings) -> RoleHost:
    """Create the host role store selected by ``settings.backend``."""
    if settings.backend == "postgres":
        if not settings.database_url:
            raise RuntimeError("DATABASE_URL environment variable is required")
        return PostgresRoleHost(config=PostgresConfig(database_url=settings.database_url))
    return InMemoryRoleHost.with_builtin_roles()


def build_role_manager(settings: RoleSyncSettings) -> RoleRegistrar:
    host = build_host(settings)
    logger.info("Role manager using %s host", settings.backend)
    return RoleRegistrar(store=host, backend=host)


def get_role_manager() -> RoleRegistrar:
    """Get or initialize the global role manager."""
    global _manager
    with _manager_lock:
        if _manager is None:
            _manager = build_role_manager(RoleSyncSettings.from_env())
        return _manager


def set_role_manager(manager: RoleRegistrar) -> None:
    """Install a pre-built role manager (custom host adapters, tests)."""
    global _manager
    with _manager_lock:
        _manager = manager


def reset_role_manager() -> None:
    global _manager
    with _manager_lock:
        _manager = None
