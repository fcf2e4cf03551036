"""Role registration and synchronization against a host role store.

Packages:

- roles: the registrar, the plugin's default roles, lifecycle hooks and the
  process-wide role manager factory
- persistence: collaborator boundary (host role store and backend protocols)
- storage: concrete host adapters (in-memory, SQL via SQLAlchemy)
"""

from rolesync.roles.registrar import RoleRegistrar
from rolesync.types import Capabilities, HostRole, RoleEntry

__all__ = ["Capabilities", "HostRole", "RoleEntry", "RoleRegistrar"]
