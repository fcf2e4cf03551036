"""FastAPI application for plugin role management.

Endpoints:
- GET /health - Liveness and configured host backend
- GET /roles - Registered plugin roles
- GET /roles/host/{name} - Host role with capabilities
- POST /roles/activate - Apply the plugin's roles to the host
- POST /roles/deactivate - Remove the plugin's roles from the host

Environment:
- ROLESYNC_BACKEND - memory (default) or postgres
- DATABASE_URL - required for the postgres backend
- No authentication (local network only)
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from api.routes.roles import router as roles_router
from rolesync.config import RoleSyncSettings

logger = logging.getLogger(__name__)

app = FastAPI(
    title="RoleSync API",
    description="API for registering plugin roles and syncing them into the host role store",
    version="1.0.0",
)

app.include_router(roles_router)


@app.get("/health")
async def health():
    """Liveness check with the configured host backend."""
    settings = RoleSyncSettings.from_env()
    return {
        "status": "ok",
        "backend": settings.backend,
    }


@app.exception_handler(Exception)
async def global_exception_handler(_request, exc):
    """Global exception handler to ensure consistent error responses."""
    logger.error("Unhandled error: %s", exc, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred",
        },
    )
