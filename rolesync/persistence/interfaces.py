from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence

from rolesync.types import HostRole


class RoleStore(Protocol):
    def get_role(self, name: str) -> Optional[HostRole]:
        """Fetch a host role by name, or None if the host does not know it."""


class RoleBackend(Protocol):
    def add_role(self, name: str, display_name: str, capabilities: Mapping[str, bool]) -> None:
        """Create the role, or merge capabilities into it if it already exists."""

    def remove_role(self, name: str) -> None:
        """Delete the role. Unknown roles are ignored."""


class RoleHost(RoleStore, RoleBackend, Protocol):
    def list_roles(self) -> Sequence[HostRole]:
        """List every role the host knows, in creation order."""
