"""Serialization helpers for slot-based save/load."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

from pyrobase.domain.ledger import COUNTER_MAX, RESOURCE_IDS
from pyrobase.domain.state import SessionState, SlotSnapshot
from pyrobase.domain.world_models import Area, Tool
from pyrobase.services.errors import SaveLoadError

SavePayload = Dict[str, Any]
SLOT_COUNT = 3


class SaveService:
    """Converts session state to/from a validated, versioned payload.

    Holds no session state of its own; every method is a pure transformation.
    """

    SAVE_VERSION = 1

    def __init__(self, resource_ids: tuple[str, ...] = RESOURCE_IDS, slot_count: int = SLOT_COUNT) -> None:
        self._resource_ids = resource_ids
        self._slot_count = slot_count

    @property
    def slot_count(self) -> int:
        return self._slot_count

    def serialize(self, state: SessionState) -> SavePayload:
        """Return the JSON-serializable slot payload for ``state``."""
        return {
            "resources": state.ledger.snapshot(),
            "last_command": state.last_command,
            "unlocked_tools": [tool.value for tool in state.unlocked_tools],
            "current_area": state.current_area.value,
        }

    def deserialize(self, payload: Mapping[str, Any]) -> SlotSnapshot:
        """Rehydrate a slot snapshot from a persisted payload."""
        if not isinstance(payload, Mapping):
            raise SaveLoadError("Slot data must be a JSON object.")
        return SlotSnapshot(
            resources=self._coerce_resources(payload.get("resources")),
            last_command=self._require_str(payload.get("last_command", ""), "last_command"),
            unlocked_tools=self._coerce_tools(payload.get("unlocked_tools")),
            current_area=self._coerce_area(payload.get("current_area")),
        )

    def apply_snapshot(self, state: SessionState, snapshot: SlotSnapshot) -> None:
        """Copy a loaded snapshot into live session state."""
        state.ledger.restore(snapshot.resources)
        state.last_command = snapshot.last_command
        state.unlocked_tools = list(snapshot.unlocked_tools)
        state.equipped_tool = snapshot.unlocked_tools[-1] if snapshot.unlocked_tools else Tool.NONE
        state.current_area = snapshot.current_area

    def serialize_file(self, slots: Mapping[int, SavePayload | None]) -> SavePayload:
        """Build the whole-file record from per-slot payloads."""
        return {
            "save_version": self.SAVE_VERSION,
            "slots": {
                str(slot): slots.get(slot) for slot in range(1, self._slot_count + 1)
            },
        }

    def deserialize_file(self, payload: Any) -> Dict[int, SavePayload | None]:
        """Split a whole-file record into raw per-slot payloads.

        Slot contents are validated later, on load, so one damaged slot does
        not hide the others.
        """
        if not isinstance(payload, Mapping):
            raise SaveLoadError("Save data must be a JSON object.")
        if payload.get("save_version") != self.SAVE_VERSION:
            raise SaveLoadError("Save format changed. Please start a new game.")
        raw_slots = payload.get("slots")
        if not isinstance(raw_slots, Mapping):
            raise SaveLoadError("Save data is missing the slots section.")
        slots: Dict[int, SavePayload | None] = {}
        for slot in range(1, self._slot_count + 1):
            entry = raw_slots.get(str(slot))
            if entry is not None and not isinstance(entry, Mapping):
                raise SaveLoadError(f"Slot {slot} must be an object or null.")
            slots[slot] = dict(entry) if entry is not None else None
        return slots

    def empty_slots(self) -> Dict[int, SavePayload | None]:
        return {slot: None for slot in range(1, self._slot_count + 1)}

    def _coerce_resources(self, value: Any) -> Dict[str, int]:
        if not isinstance(value, Mapping):
            raise SaveLoadError("resources must be an object.")
        resources: Dict[str, int] = {}
        for resource_id in self._resource_ids:
            amount = value.get(resource_id, 0)
            if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
                raise SaveLoadError(f"resources.{resource_id} must be a non-negative integer.")
            resources[resource_id] = min(amount, COUNTER_MAX)
        unknown = set(value) - set(self._resource_ids)
        if unknown:
            raise SaveLoadError(f"Unknown resources in save: {', '.join(sorted(unknown))}")
        return resources

    @staticmethod
    def _coerce_tools(value: Any) -> List[Tool]:
        if not isinstance(value, list):
            raise SaveLoadError("unlocked_tools must be a list.")
        tools: List[Tool] = []
        for entry in value:
            try:
                tool = Tool(entry)
            except ValueError as exc:
                raise SaveLoadError(f"Unknown tool '{entry}'.") from exc
            if tool is Tool.NONE:
                continue
            if tool not in tools:
                tools.append(tool)
        return tools

    @staticmethod
    def _coerce_area(value: Any) -> Area:
        try:
            return Area(value)
        except ValueError as exc:
            raise SaveLoadError(f"Unknown area '{value}'.") from exc

    @staticmethod
    def _require_str(value: Any, context: str) -> str:
        if not isinstance(value, str):
            raise SaveLoadError(f"{context} must be a string.")
        return value
