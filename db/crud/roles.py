"""CRUD operations for the host role tables.

Functions take a SQLAlchemy ``Session`` and leave transaction control to the
caller (see ``PostgresRoleHost``).
"""

from __future__ import annotations

from typing import Mapping, Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, selectinload

from db.models.roles import HostRoleRecord, RoleCapabilityRecord


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------


def get_role(db: Session, name: str) -> HostRoleRecord | None:
    """Get a host role with its capabilities loaded."""
    result = db.execute(
        select(HostRoleRecord).options(selectinload(HostRoleRecord.capabilities)).where(HostRoleRecord.name == name)
    )
    return result.scalars().first()


def get_roles(db: Session) -> Sequence[HostRoleRecord]:
    """Get all host roles in creation order."""
    result = db.execute(
        select(HostRoleRecord).options(selectinload(HostRoleRecord.capabilities)).order_by(HostRoleRecord.id)
    )
    return result.scalars().all()


def capabilities_of(record: HostRoleRecord) -> dict[str, bool]:
    return {cap.capability: bool(cap.granted) for cap in record.capabilities}


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------


def create_role(
    db: Session,
    name: str,
    display_name: str,
    capabilities: Mapping[str, bool] | None = None,
) -> HostRoleRecord:
    """Create a host role with the given capabilities."""
    record = HostRoleRecord(name=name, display_name=display_name)
    record.capabilities = [
        RoleCapabilityRecord(capability=capability, granted=bool(grant))
        for capability, grant in (capabilities or {}).items()
    ]
    db.add(record)
    db.flush()
    return record


def merge_capabilities(db: Session, record: HostRoleRecord, capabilities: Mapping[str, bool]) -> int:
    """Merge capabilities into an existing role.

    Existing capabilities keep their row; their grant flag is overwritten by
    the given value. Returns the number of capabilities written.
    """
    existing = {cap.capability: cap for cap in record.capabilities}
    for capability, grant in capabilities.items():
        row = existing.get(capability)
        if row is None:
            record.capabilities.append(RoleCapabilityRecord(capability=capability, granted=bool(grant)))
        else:
            row.granted = bool(grant)
    db.flush()
    return len(capabilities)


def delete_role(db: Session, name: str) -> bool:
    """Delete a role and its capabilities. Returns False if it did not exist."""
    # Explicit child delete: SQLite ignores ON DELETE CASCADE unless enabled per connection.
    db.execute(delete(RoleCapabilityRecord).where(RoleCapabilityRecord.role_name == name))
    result = db.execute(delete(HostRoleRecord).where(HostRoleRecord.name == name))
    return bool(result.rowcount)
