#!/usr/bin/env python3
"""Run the FastAPI role management server.

Usage:
    python scripts/run_api.py [--host HOST] [--port PORT]

Environment:
    ROLESYNC_BACKEND - memory (default) or postgres
    DATABASE_URL - Required for the postgres backend

Examples:
    python scripts/run_api.py
    ROLESYNC_BACKEND=postgres python scripts/run_api.py --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure imports work when invoked as a script
_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from rolesync.config import RoleSyncSettings  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    """Run the API server."""
    parser = argparse.ArgumentParser(description="Run the FastAPI role management server.")
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind to (default: 8000)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )
    args = parser.parse_args(argv)

    try:
        settings = RoleSyncSettings.from_env()
    except (RuntimeError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Starting FastAPI server on {args.host}:{args.port} ({settings.backend} host)")
    print("Endpoints:")
    print(f"  - GET  http://{args.host}:{args.port}/health")
    print(f"  - GET  http://{args.host}:{args.port}/roles")
    print(f"  - POST http://{args.host}:{args.port}/roles/activate")
    print()

    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )

    return 0


if __name__ == "__main__":
    sys.exit(main())
