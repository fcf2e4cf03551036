"""Persistence boundary.

The host platform owns role storage. This package defines the protocols the
registrar depends on so host adapters can be swapped (in-memory, SQL, test
doubles).
"""

from .interfaces import RoleBackend, RoleHost, RoleStore

__all__ = ["RoleBackend", "RoleHost", "RoleStore"]
