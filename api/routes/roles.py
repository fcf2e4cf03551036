"""Role registration API endpoints."""

from __future__ import annotations

import asyncio
from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException, Path as PathParam
from pydantic import BaseModel

from rolesync.roles import activate, deactivate, get_role_manager

router = APIRouter(prefix="/roles", tags=["roles"])


class RegisteredRoleResponse(BaseModel):
    """A role registered by the plugin."""

    name: str
    display_name: str
    template: Optional[str] = None


class RegisteredRolesResponse(BaseModel):
    roles: List[RegisteredRoleResponse]
    count: int


class HostRoleResponse(BaseModel):
    """A role as stored in the host."""

    name: str
    display_name: str
    capabilities: Dict[str, bool]


class AppliedRolesResponse(BaseModel):
    applied: List[str]
    count: int


class RemovedRolesResponse(BaseModel):
    removed: List[str]
    count: int


@router.get("", response_model=RegisteredRolesResponse)
async def list_registered_roles():
    """List roles registered with the role manager, in registration order."""
    manager = get_role_manager()
    roles = [
        {"name": name, "display_name": entry.display_name, "template": entry.template}
        for name, entry in manager.entries()
    ]
    return {"roles": roles, "count": len(roles)}


@router.get("/host/{name}", response_model=HostRoleResponse)
async def get_host_role(name: str = PathParam(..., description="Host role name")):
    """Get a role and its capabilities from the host store."""
    manager = get_role_manager()
    role = await asyncio.to_thread(manager.store.get_role, name)
    if role is None:
        raise HTTPException(status_code=404, detail=f"Role '{name}' not found")

    return HostRoleResponse(name=role.name, display_name=role.display_name, capabilities=role.capabilities)


@router.post("/activate", response_model=AppliedRolesResponse)
async def activate_roles():
    """Register the default roles and apply them to the host."""
    # Host calls may block on the database
    applied = await asyncio.to_thread(activate, get_role_manager())
    return {"applied": applied, "count": len(applied)}


@router.post("/deactivate", response_model=RemovedRolesResponse)
async def deactivate_roles():
    """Remove the plugin's roles from the host."""
    removed = await asyncio.to_thread(deactivate, get_role_manager())
    return {"removed": removed, "count": len(removed)}
