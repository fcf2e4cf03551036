"""Default roles registered by the plugin.

Both roles start from the host's ``editor`` role. Adjusting capabilities
after activation is left to site administrators.
"""

from __future__ import annotations

from rolesync.roles.registrar import RoleRegistrar
from rolesync.types import RoleEntry

DEFAULT_ROLES: dict[str, RoleEntry] = {
    "content_manager": RoleEntry(display_name="Content Manager", template="editor"),
    "content_editor": RoleEntry(display_name="Content Editor", template="editor"),
}


def register_default_roles(registrar: RoleRegistrar) -> None:
    """Register every default role on the registrar."""
    for role, entry in DEFAULT_ROLES.items():
        registrar.register(role, entry.display_name, entry.template)
