"""Concrete host role stores.

Both adapters implement ``RoleStore`` and ``RoleBackend`` so a single
instance can be handed to ``RoleRegistrar`` for reads and writes.
"""

from .memory import BUILTIN_ROLES, InMemoryRoleHost
from .postgres import PostgresConfig, PostgresRoleHost

__all__ = ["BUILTIN_ROLES", "InMemoryRoleHost", "PostgresConfig", "PostgresRoleHost"]
