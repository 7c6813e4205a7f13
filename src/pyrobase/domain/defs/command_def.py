"""Command vocabulary definition data structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommandDef:
    """A single entry of the command vocabulary."""

    id: str
    usage: str
    help: str
    alias_of: str | None = None

    @property
    def action(self) -> str:
        """Return the command id this entry dispatches to."""
        return self.alias_of or self.id
