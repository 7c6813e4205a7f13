"""Resource definition data structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ResourceDef:
    """Describes a collectible resource counter."""

    id: str
    name: str
    description: str
