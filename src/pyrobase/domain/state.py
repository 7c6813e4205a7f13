"""Domain-level session state tracking."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from pyrobase.core.types import SessionMode
from pyrobase.domain.ledger import ResourceLedger
from pyrobase.domain.message_log import DEFAULT_CAPACITY, MessageLog
from pyrobase.domain.world_models import STARTING_AREA, STARTING_TOOL, Area, Tool


def _starting_tools() -> List[Tool]:
    return [STARTING_TOOL]


@dataclass
class SessionState:
    """Everything a running session owns."""

    mode: SessionMode
    ledger: ResourceLedger = field(default_factory=ResourceLedger)
    log: MessageLog = field(default_factory=lambda: MessageLog(DEFAULT_CAPACITY))
    input_buffer: str = ""
    equipped_tool: Tool = STARTING_TOOL
    unlocked_tools: List[Tool] = field(default_factory=_starting_tools)
    current_area: Area = STARTING_AREA
    last_command: str = ""
    slot: int | None = None
    cleared_through: int = 0
    running: bool = True

    def reset_progress(self) -> None:
        """Return resources, tools, area and last command to new-game values."""
        self.ledger.reset()
        self.equipped_tool = STARTING_TOOL
        self.unlocked_tools = _starting_tools()
        self.current_area = STARTING_AREA
        self.last_command = ""


@dataclass(slots=True)
class SlotSnapshot:
    """The persistable subset of a session, as stored in one save slot."""

    resources: Dict[str, int]
    last_command: str
    unlocked_tools: List[Tool]
    current_area: Area
