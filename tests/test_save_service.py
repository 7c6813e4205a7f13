from __future__ import annotations

import pytest

from pyrobase.domain.state import SessionState
from pyrobase.domain.world_models import Area, Tool
from pyrobase.services.errors import SaveLoadError
from pyrobase.services.save_service import SaveService


def _state() -> SessionState:
    state = SessionState(mode="in_game")
    state.ledger.apply({"firestone": 12, "sulfur_ore": 3})
    state.last_command = "mine"
    state.unlocked_tools.append(Tool.PYRODRILL)
    state.current_area = Area.INFERNO_WELLS
    return state


def test_save_round_trip_preserves_state() -> None:
    service = SaveService()
    state = _state()

    snapshot = service.deserialize(service.serialize(state))
    restored = SessionState(mode="in_game")
    service.apply_snapshot(restored, snapshot)

    assert restored.ledger.snapshot() == state.ledger.snapshot()
    assert restored.last_command == "mine"
    assert restored.unlocked_tools == [Tool.FLAMESTARTER, Tool.PYRODRILL]
    assert restored.equipped_tool is Tool.PYRODRILL
    assert restored.current_area is Area.INFERNO_WELLS


def test_serialized_payload_uses_enum_names() -> None:
    payload = SaveService().serialize(_state())
    assert payload["unlocked_tools"] == ["Flamestarter", "Pyrodrill"]
    assert payload["current_area"] == "InfernoWells"
    assert payload["resources"]["firestone"] == 12


def test_empty_tool_list_equips_nothing() -> None:
    service = SaveService()
    payload = service.serialize(_state())
    payload["unlocked_tools"] = []
    restored = SessionState(mode="in_game")
    service.apply_snapshot(restored, service.deserialize(payload))
    assert restored.equipped_tool is Tool.NONE


def test_missing_resources_default_to_zero() -> None:
    service = SaveService()
    payload = service.serialize(_state())
    del payload["resources"]["sulfur_ore"]
    assert service.deserialize(payload).resources["sulfur_ore"] == 0


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("resources", {"firestone": -1}),
        ("resources", {"firestone": "10"}),
        ("resources", {"gold": 5}),
        ("resources", []),
        ("unlocked_tools", ["Spoon"]),
        ("unlocked_tools", "Pyrodrill"),
        ("current_area", "Atlantis"),
        ("last_command", 7),
    ],
)
def test_invalid_slot_payload_raises(key: str, value: object) -> None:
    service = SaveService()
    payload = service.serialize(_state())
    payload[key] = value
    with pytest.raises(SaveLoadError):
        service.deserialize(payload)


def test_non_mapping_slot_raises() -> None:
    with pytest.raises(SaveLoadError):
        SaveService().deserialize(["nope"])  # type: ignore[arg-type]


def test_file_record_round_trip() -> None:
    service = SaveService()
    slot_payload = service.serialize(_state())
    record = service.serialize_file({2: slot_payload})
    assert record["save_version"] == SaveService.SAVE_VERSION
    assert record["slots"] == {"1": None, "2": slot_payload, "3": None}
    assert service.deserialize_file(record) == {1: None, 2: slot_payload, 3: None}


@pytest.mark.parametrize(
    "record",
    [
        [],
        {"save_version": 99, "slots": {}},
        {"save_version": 1},
        {"save_version": 1, "slots": {"1": "broken"}},
    ],
)
def test_invalid_file_record_raises(record: object) -> None:
    with pytest.raises(SaveLoadError):
        SaveService().deserialize_file(record)
