#!/usr/bin/env python3
"""Initialize the host role schema.

Creates the host_roles tables in the database pointed to by DATABASE_URL and,
with --seed, inserts the built-in host roles that plugin templates refer to.

Usage:
  python -m db.init_db [--seed]

Requirements:
  - DATABASE_URL must be set
"""

from __future__ import annotations

import argparse
import os

from rolesync.config import RoleSyncSettings, configure_logging
from rolesync.storage.memory import BUILTIN_ROLES
from rolesync.storage.postgres import PostgresConfig, PostgresRoleHost


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create the host role tables.")
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Insert built-in host roles (administrator, editor, ...) that do not exist yet",
    )
    args = parser.parse_args(argv)

    if not os.getenv("DATABASE_URL"):
        raise SystemExit("DATABASE_URL is not set")

    # Schema setup always targets the SQL host, whatever ROLESYNC_BACKEND says.
    settings = RoleSyncSettings.from_env({**os.environ, "ROLESYNC_BACKEND": "postgres"})
    configure_logging(settings.log_level)

    host = PostgresRoleHost(config=PostgresConfig(database_url=settings.database_url))
    try:
        host.create_schema()
        if args.seed:
            for role in BUILTIN_ROLES:
                if host.get_role(role.name) is None:
                    host.add_role(role.name, role.display_name, role.capabilities)
    finally:
        host.dispose()

    print("✅ Host role schema applied")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
