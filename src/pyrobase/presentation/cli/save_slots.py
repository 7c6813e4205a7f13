"""File-system storage for the single multi-slot save file."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from pyrobase.core.log import get_logger
from pyrobase.presentation.cli import config
from pyrobase.services.errors import SaveLoadError
from pyrobase.services.save_service import SavePayload, SaveService

log = get_logger(__name__)


class SaveFileStore:
    """Reads and overwrites the whole save file; one JSON object, three slots."""

    def __init__(self, path: Path | str | None = None, save_service: SaveService | None = None) -> None:
        self._path = Path(path) if path is not None else config.get_save_path()
        self._save_service = save_service or SaveService()

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self) -> Dict[int, SavePayload | None]:
        """Return every slot payload; a missing or corrupt file yields empty slots."""
        if not self._path.exists():
            return self._save_service.empty_slots()
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            return self._save_service.deserialize_file(raw)
        except (OSError, ValueError, SaveLoadError) as exc:
            log.warning("save_file_unreadable", path=str(self._path), error=str(exc))
            return self._save_service.empty_slots()

    def read_slot(self, slot: int) -> SavePayload | None:
        """Return the raw payload stored in ``slot``, or None when empty."""
        self._validate_slot(slot)
        return self.load_all().get(slot)

    def write_slot(self, slot: int, payload: SavePayload) -> None:
        """Persist ``payload`` into ``slot``, keeping the other slots intact."""
        self._validate_slot(slot)
        slots = self.load_all()
        slots[slot] = payload
        record: Dict[str, Any] = self._save_service.serialize_file(slots)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(record, indent=2, sort_keys=True), encoding="utf-8")

    def _validate_slot(self, slot: int) -> None:
        if not 1 <= slot <= self._save_service.slot_count:
            raise ValueError(f"Slot index must be between 1 and {self._save_service.slot_count}.")
