"""SQLAlchemy models for the host role tables.

- host_roles
- host_role_capabilities
"""

from __future__ import annotations


from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, Text, func
from sqlalchemy.orm import DeclarativeBase, relationship


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class HostRoleRecord(Base):
    """A role known to the host platform.

    Table: host_roles
    """

    __tablename__ = "host_roles"

    # Integer so SQLite aliases it to rowid; list order follows it.
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, unique=True)  # e.g. "editor"
    display_name = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    capabilities = relationship(
        "RoleCapabilityRecord",
        back_populates="role",
        cascade="all, delete-orphan",
        order_by="RoleCapabilityRecord.capability",
    )

    def __repr__(self) -> str:
        return f"<HostRoleRecord(name={self.name}, display_name={self.display_name})>"


class RoleCapabilityRecord(Base):
    """A capability grant (or explicit deny) on a host role.

    Table: host_role_capabilities
    """

    __tablename__ = "host_role_capabilities"

    role_name = Column(Text, ForeignKey("host_roles.name", ondelete="CASCADE"), primary_key=True)
    capability = Column(Text, primary_key=True)
    granted = Column(Boolean, nullable=False, default=True)

    role = relationship("HostRoleRecord", back_populates="capabilities")

    __table_args__ = (Index("idx_host_role_capabilities_capability", "capability"),)

    def __repr__(self) -> str:
        return f"<RoleCapabilityRecord(role={self.role_name}, {self.capability}={self.granted})>"
