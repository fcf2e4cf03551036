"""SQLAlchemy models for the host role tables."""

from db.models.roles import Base, HostRoleRecord, RoleCapabilityRecord

__all__ = ["Base", "HostRoleRecord", "RoleCapabilityRecord"]
