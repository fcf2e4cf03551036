"""Shared role dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

# capability name -> grant flag
Capabilities = Dict[str, bool]


@dataclass(frozen=True)
class RoleEntry:
    """A role declared by the plugin, keyed by name in the registrar."""

    display_name: str
    template: str | None = None  # host role to copy capabilities from


@dataclass
class HostRole:
    """A role as the host platform stores it."""

    name: str
    display_name: str
    capabilities: Capabilities = field(default_factory=dict)
