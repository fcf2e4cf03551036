#!/usr/bin/env python3
"""Apply or remove the plugin's roles from the command line.

Runs the same hooks as plugin activation/deactivation against the configured
host (see ROLESYNC_BACKEND / DATABASE_URL).

Usage:
    python scripts/sync_roles.py add
    python scripts/sync_roles.py remove
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure imports work when invoked as a script
_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from rolesync.config import RoleSyncSettings, configure_logging  # noqa: E402
from rolesync.roles import activate, deactivate, get_role_manager  # noqa: E402

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Apply or remove the plugin's roles.")
    parser.add_argument("action", choices=("add", "remove"), help="add: apply roles, remove: delete roles")
    args = parser.parse_args(argv)

    settings = RoleSyncSettings.from_env()
    configure_logging(settings.log_level)

    manager = get_role_manager()
    if args.action == "add":
        roles = activate(manager)
    else:
        roles = deactivate(manager)

    for role in roles:
        print(f"{args.action}: {role}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
