"""Plugin roles.

The registrar holds the roles the plugin declares; lifecycle hooks apply
them to the host on activation and remove them on deactivation.
"""

from __future__ import annotations

from .defaults import DEFAULT_ROLES, register_default_roles
from .factory import get_role_manager, reset_role_manager, set_role_manager
from .lifecycle import activate, deactivate
from .registrar import RoleRegistrar

__all__ = [
    "DEFAULT_ROLES",
    "RoleRegistrar",
    "activate",
    "deactivate",
    "get_role_manager",
    "register_default_roles",
    "reset_role_manager",
    "set_role_manager",
]
