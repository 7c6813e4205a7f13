"""Repository for the command vocabulary."""
from __future__ import annotations

from typing import Dict

from pyrobase.data.errors import DataValidationError
from pyrobase.data.repositories.base import RepositoryBase
from pyrobase.domain.defs import CommandDef


class CommandsRepository(RepositoryBase[CommandDef]):
    """Loads the ordered command vocabulary and its help text."""

    def __init__(self, base_path=None) -> None:
        super().__init__("commands.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, CommandDef]:
        staged = self._build_entries(raw, "commands")
        known_ids = {str(entry["id"]).strip() for entry in staged}
        definitions: Dict[str, CommandDef] = {}
        for entry in staged:
            command_id = self._require_str(entry.get("id"), "command.id").strip()
            if command_id.lower() != command_id or " " in command_id:
                raise DataValidationError(
                    f"command id '{command_id}' must be a single lowercase word."
                )
            usage = self._require_str(entry.get("usage", command_id), f"command '{command_id}' usage")
            help_text = self._require_str(entry.get("help"), f"command '{command_id}' help")
            alias_of = entry.get("alias_of")
            if alias_of is not None:
                alias_of = self._require_str(alias_of, f"command '{command_id}' alias_of")
                if alias_of not in known_ids:
                    raise DataValidationError(
                        f"command '{command_id}' aliases unknown command '{alias_of}'."
                    )
            definitions[command_id] = CommandDef(
                id=command_id, usage=usage, help=help_text, alias_of=alias_of
            )
        return definitions

    def vocabulary(self) -> tuple[str, ...]:
        """Return command keywords in definition order."""
        return tuple(command.id for command in self.all())
