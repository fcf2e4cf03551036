from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Optional, Sequence

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from db.crud import roles as roles_crud
from db.models.roles import Base, HostRoleRecord
from rolesync.persistence.interfaces import RoleHost
from rolesync.storage.postgres.config import PostgresConfig
from rolesync.types import HostRole

logger = logging.getLogger(__name__)


def _to_host_role(record: HostRoleRecord) -> HostRole:
    return HostRole(
        name=record.name,
        display_name=record.display_name,
        capabilities=roles_crud.capabilities_of(record),
    )


class PostgresRoleHost(RoleHost):
    """Host role store backed by the ``host_roles`` tables.

    Each call runs in its own transaction; errors roll it back and propagate.
    """

    def __init__(self, *, config: PostgresConfig) -> None:
        self._config = config
        self._engine: Any | None = None
        self._session_factory: sessionmaker[Session] | None = None

    def _get_engine(self) -> Any:
        if self._engine is None:
            # Do not log the URL (it may contain secrets).
            self._engine = create_engine(self._config.database_url, echo=self._config.echo, pool_pre_ping=True)
        return self._engine

    @contextmanager
    def _session(self) -> Iterator[Session]:
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self._get_engine(), expire_on_commit=False)
        with self._session_factory.begin() as session:
            yield session

    def create_schema(self) -> None:
        """Create the host role tables if they do not exist."""
        Base.metadata.create_all(self._get_engine())
        logger.info("Host role schema ready")

    def get_role(self, name: str) -> Optional[HostRole]:
        with self._session() as db:
            record = roles_crud.get_role(db, name)
            return None if record is None else _to_host_role(record)

    def list_roles(self) -> Sequence[HostRole]:
        with self._session() as db:
            return [_to_host_role(record) for record in roles_crud.get_roles(db)]

    def add_role(self, name: str, display_name: str, capabilities: Mapping[str, bool]) -> None:
        with self._session() as db:
            record = roles_crud.get_role(db, name)
            if record is not None:
                written = roles_crud.merge_capabilities(db, record, capabilities)
                logger.info("Merged %d capabilities into host role %s", written, name)
                return

            roles_crud.create_role(db, name, display_name, capabilities)
            logger.info("Created host role %s", name)

    def remove_role(self, name: str) -> None:
        with self._session() as db:
            removed = roles_crud.delete_role(db, name)
        if removed:
            logger.info("Removed host role %s", name)
        else:
            logger.debug("Host role %s not found, nothing to remove", name)

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
