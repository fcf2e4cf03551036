"""Role registrar: declares plugin roles and syncs them into the host.

Registration is purely in-memory. Nothing touches the host until ``add()`` or
``remove()`` is called, typically from plugin activation/deactivation hooks.
"""

from __future__ import annotations

import logging
import threading

from rolesync.persistence.interfaces import RoleBackend, RoleStore
from rolesync.types import Capabilities, HostRole, RoleEntry

logger = logging.getLogger(__name__)


class RoleRegistrar:
    """Ordered set of plugin roles applied against a host role store.

    Reads go through ``store`` (``get_role``), writes through ``backend``
    (``add_role`` / ``remove_role``). Host adapters usually implement both.

    Safe to share between threads: a sync holds the lock for its whole pass,
    so concurrent hooks run one after the other.
    """

    def __init__(self, store: RoleStore, backend: RoleBackend) -> None:
        self.store = store
        self.backend = backend
        self._roles: dict[str, RoleEntry] = {}
        self._lock = threading.RLock()

    def register(self, role: str, display_name: str, template: str | None = None) -> None:
        """Register a role, overwriting any earlier entry with the same name.

        Args:
            role: Role name (host key)
            display_name: Human readable name
            template: Optional host role whose capabilities seed this one
        """
        with self._lock:
            self._roles[role] = RoleEntry(display_name=display_name, template=template)
        logger.debug("Registered role %s (template=%s)", role, template)

    def get_roles(self) -> list[str]:
        """Return registered role names in registration order."""
        with self._lock:
            return list(self._roles)

    def get_entry(self, role: str) -> RoleEntry | None:
        return self._roles.get(role)

    def entries(self) -> list[tuple[str, RoleEntry]]:
        with self._lock:
            return list(self._roles.items())

    def add(self) -> None:
        """Apply every registered role to the host.

        Capabilities are copied from the template. When the role already
        exists, capabilities it already defines (granted or denied) are left
        out so existing grants are not overwritten.
        """
        with self._lock:
            for role, entry in self.entries():
                capabilities = self.get_capabilities(entry.template)

                host_role = self.store.get_role(role)
                if host_role is not None and capabilities:
                    capabilities = {
                        capability: grant
                        for capability, grant in capabilities.items()
                        if not self.capability_exists(host_role, capability)
                    }

                logger.info("Adding role %s with %d capabilities", role, len(capabilities))
                self.backend.add_role(role, entry.display_name, capabilities)

    def remove(self) -> None:
        """Remove every registered role from the host."""
        with self._lock:
            for role in self.get_roles():
                logger.info("Removing role %s", role)
                self.backend.remove_role(role)

    def get_capabilities(self, role: str | None) -> Capabilities:
        """Return a copy of the host capabilities for ``role`` ({} if unknown)."""
        if role is None:
            return {}

        host_role = self.store.get_role(role)
        if host_role is None:
            return {}

        return dict(host_role.capabilities)

    @staticmethod
    def capability_exists(host_role: HostRole, capability: str) -> bool:
        """True if the capability is defined on the host role, whatever its grant."""
        return capability in host_role.capabilities
