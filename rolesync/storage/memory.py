"""In-memory host role store.

Mirrors the host platform's role semantics without a database:
- ``add_role`` creates a missing role, or merges capabilities into an
  existing one (display name untouched)
- ``remove_role`` on an unknown role is a no-op
- reads return copies so callers cannot mutate host state
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Sequence

from rolesync.persistence.interfaces import RoleHost
from rolesync.types import HostRole

logger = logging.getLogger(__name__)


# Roles every host install ships with. Templates usually point at one of these.
BUILTIN_ROLES: tuple[HostRole, ...] = (
    HostRole(
        name="administrator",
        display_name="Administrator",
        capabilities={
            "read": True,
            "edit_posts": True,
            "edit_others_posts": True,
            "edit_published_posts": True,
            "publish_posts": True,
            "delete_posts": True,
            "delete_others_posts": True,
            "manage_categories": True,
            "moderate_comments": True,
            "upload_files": True,
            "manage_options": True,
            "edit_users": True,
            "promote_users": True,
        },
    ),
    HostRole(
        name="editor",
        display_name="Editor",
        capabilities={
            "read": True,
            "edit_posts": True,
            "edit_others_posts": True,
            "edit_published_posts": True,
            "publish_posts": True,
            "delete_posts": True,
            "delete_others_posts": True,
            "manage_categories": True,
            "moderate_comments": True,
            "upload_files": True,
        },
    ),
    HostRole(
        name="author",
        display_name="Author",
        capabilities={
            "read": True,
            "edit_posts": True,
            "edit_published_posts": True,
            "publish_posts": True,
            "delete_posts": True,
            "upload_files": True,
        },
    ),
    HostRole(
        name="contributor",
        display_name="Contributor",
        capabilities={"read": True, "edit_posts": True, "delete_posts": True},
    ),
    HostRole(name="subscriber", display_name="Subscriber", capabilities={"read": True}),
)


def _copy(role: HostRole) -> HostRole:
    return HostRole(name=role.name, display_name=role.display_name, capabilities=dict(role.capabilities))


class InMemoryRoleHost(RoleHost):
    """Process-local host role store."""

    def __init__(self, roles: Iterable[HostRole] = ()) -> None:
        self._roles: dict[str, HostRole] = {}
        self.seed(roles)

    @classmethod
    def with_builtin_roles(cls) -> "InMemoryRoleHost":
        return cls(BUILTIN_ROLES)

    def seed(self, roles: Iterable[HostRole]) -> None:
        """Insert or replace host roles as-is (no merge)."""
        for role in roles:
            self._roles[role.name] = _copy(role)

    def get_role(self, name: str) -> Optional[HostRole]:
        role = self._roles.get(name)
        return None if role is None else _copy(role)

    def list_roles(self) -> Sequence[HostRole]:
        return [_copy(role) for role in self._roles.values()]

    def add_role(self, name: str, display_name: str, capabilities: Mapping[str, bool]) -> None:
        existing = self._roles.get(name)
        if existing is not None:
            existing.capabilities.update(capabilities)
            logger.info("Merged %d capabilities into host role %s", len(capabilities), name)
            return

        self._roles[name] = HostRole(name=name, display_name=display_name, capabilities=dict(capabilities))
        logger.info("Created host role %s", name)

    def remove_role(self, name: str) -> None:
        if self._roles.pop(name, None) is None:
            logger.debug("Host role %s not found, nothing to remove", name)
            return
        logger.info("Removed host role %s", name)
