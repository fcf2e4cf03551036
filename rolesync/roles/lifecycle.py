"""Plugin activation and deactivation hooks."""

from __future__ import annotations

import logging

from rolesync.roles.defaults import register_default_roles
from rolesync.roles.factory import get_role_manager
from rolesync.roles.registrar import RoleRegistrar

logger = logging.getLogger(__name__)


def activate(registrar: RoleRegistrar | None = None) -> list[str]:
    """Register the default roles and apply them to the host.

    Returns the names of the roles applied.
    """
    registrar = registrar or get_role_manager()
    register_default_roles(registrar)
    registrar.add()

    roles = registrar.get_roles()
    logger.info("Activated %d roles: %s", len(roles), ", ".join(roles))
    return roles


def deactivate(registrar: RoleRegistrar | None = None) -> list[str]:
    """Remove the default roles from the host.

    Defaults are registered first so a fresh process can deactivate roles a
    previous process created.
    """
    registrar = registrar or get_role_manager()
    register_default_roles(registrar)
    registrar.remove()

    roles = registrar.get_roles()
    logger.info("Deactivated %d roles: %s", len(roles), ", ".join(roles))
    return roles
