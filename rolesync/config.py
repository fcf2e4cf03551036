"""Environment-driven settings and logging setup.

Environment:
    ROLESYNC_BACKEND - ``memory`` (default) or ``postgres``
    DATABASE_URL - Required for the ``postgres`` backend
    ROLESYNC_LOG_LEVEL - Log level name (default: INFO)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Literal, Mapping, Optional, cast

BackendName = Literal["memory", "postgres"]

BACKENDS: tuple[str, ...] = ("memory", "postgres")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class RoleSyncSettings:
    """Runtime settings. ``database_url`` is never logged."""

    backend: BackendName = "memory"
    database_url: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RoleSyncSettings":
        env = os.environ if environ is None else environ

        backend = env.get("ROLESYNC_BACKEND", "memory").strip().lower()
        if backend not in BACKENDS:
            raise ValueError(f"Unsupported ROLESYNC_BACKEND: {backend!r} (expected one of {', '.join(BACKENDS)})")

        database_url = env.get("DATABASE_URL") or None
        if backend == "postgres" and not database_url:
            raise RuntimeError("DATABASE_URL environment variable is required")

        return cls(
            backend=cast(BackendName, backend),
            database_url=database_url,
            log_level=env.get("ROLESYNC_LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging for scripts and the API server."""
    if level is None:
        level = os.environ.get("ROLESYNC_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
