"""Command-and-message engine for a single play session."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Protocol

from pyrobase.core.clock import Clock, TickTimer
from pyrobase.core.log import get_logger
from pyrobase.core.types import SessionMode
from pyrobase.data.repositories import CommandsRepository, ResourcesRepository
from pyrobase.domain.message_log import DEFAULT_CAPACITY, Message, MessageLog
from pyrobase.domain.ledger import ResourceLedger
from pyrobase.domain.state import SessionState, SlotSnapshot
from pyrobase.domain.world_models import MINING_TOOLS, Severity, Tool
from pyrobase.services.command_resolver import (
    Classification,
    CommandResolver,
    EmptyInput,
    InfoResult,
    KnownCommand,
    NotFound,
    Suggestion,
    UnknownInput,
)
from pyrobase.services.errors import SaveLoadError
from pyrobase.services.save_service import SavePayload, SaveService

log = get_logger(__name__)

KEY_ENTER = "enter"
KEY_BACKSPACE = "backspace"
KEY_ESCAPE = "escape"

DEFAULT_TICK_PERIOD = 0.05
DEFAULT_VIEW_MESSAGES = 50
PASSIVE_EFFECT: Dict[str, int] = {"firestone": 1}
COLLECT_EFFECT: Dict[str, int] = {"firestone": 1}
MINE_EFFECT: Dict[str, int] = {"emberash": 2}


class SlotStore(Protocol):
    def read_slot(self, slot: int) -> SavePayload | None: ...

    def write_slot(self, slot: int, payload: SavePayload) -> None: ...


@dataclass(frozen=True, slots=True)
class SessionView:
    """Read-only snapshot handed to the renderer."""

    mode: SessionMode
    input_text: str
    messages: List[Message]
    resources: Dict[str, int]
    tool: str
    area: str
    suggestions: List[str]
    slot: int | None
    running: bool


class GameSession:
    """Owns the live session and applies one input line at a time.

    ``has_menu`` selects the home-menu variant, which starts at the slot menu.
    Without it the session starts in game, bound to slot 1.
    """

    def __init__(
        self,
        *,
        commands_repo: CommandsRepository,
        resources_repo: ResourcesRepository,
        save_service: SaveService | None = None,
        store: SlotStore | None = None,
        has_menu: bool = True,
        tick_period: float = DEFAULT_TICK_PERIOD,
        clock: Clock = time.monotonic,
        log_capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        self._commands_repo = commands_repo
        self._resources_repo = resources_repo
        self._resolver = CommandResolver(commands_repo.vocabulary(), resources_repo)
        self._save_service = save_service or SaveService(resources_repo.ids())
        self._store = store
        self._has_menu = has_menu
        self._timer = TickTimer(tick_period, clock)
        self._state = SessionState(
            mode="at_menu" if has_menu else "in_game",
            ledger=ResourceLedger(resources_repo.ids()),
            log=MessageLog(log_capacity),
        )
        self._handlers: Dict[str, Callable[[str], None]] = {
            "collect": self._do_collect,
            "mine": self._do_mine,
            "explore": self._do_explore,
            "craft": self._do_craft,
            "help": self._do_help,
            "quit": self._do_quit,
            "about": self._do_about_usage,
            "clear": self._do_clear,
        }
        if has_menu:
            self._show_menu()
        else:
            self.select_slot(1)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def resolver(self) -> CommandResolver:
        return self._resolver

    @property
    def resources_repo(self) -> ResourcesRepository:
        return self._resources_repo

    @property
    def running(self) -> bool:
        return self._state.running

    # Input -----------------------------------------------------------------

    def handle_key(self, key: str) -> None:
        """Apply a single key event from the terminal adapter."""
        if not self._state.running:
            return
        if key == KEY_ENTER:
            line = self._state.input_buffer
            self._state.input_buffer = ""
            self.handle_line(line)
        elif key == KEY_BACKSPACE:
            self._state.input_buffer = self._state.input_buffer[:-1]
        elif key == KEY_ESCAPE:
            log.info("session_escaped", slot=self._state.slot)
            self._state.running = False
        elif len(key) == 1 and key.isprintable():
            self._state.input_buffer += key

    def handle_line(self, line: str) -> None:
        """Submit a complete input line."""
        if not self._state.running:
            return
        self._state.input_buffer = ""
        if self._state.mode == "at_menu":
            self._handle_menu_line(line)
            return
        self.submit(line)

    def submit(self, line: str) -> Classification:
        """Classify and apply a line while in game."""
        if self._state.mode != "in_game":
            raise RuntimeError("Commands can only be submitted while in game.")
        classification = self._resolver.classify(line)
        if isinstance(classification, EmptyInput):
            return classification
        if isinstance(classification, KnownCommand):
            action = self._commands_repo.get(classification.name).action
            self._handlers[action](line.strip())
        elif isinstance(classification, InfoResult):
            self._log(classification.text, Severity.INFO)
        elif isinstance(classification, NotFound):
            self._log("Resource not found.", Severity.FAILURE)
        elif isinstance(classification, Suggestion):
            self._log(
                f"Unknown command: '{classification.text}'. "
                f"Did you mean '{classification.candidate}'?",
                Severity.FAILURE,
            )
        elif isinstance(classification, UnknownInput):
            self._log(f"Unknown command: '{classification.text}'.", Severity.FAILURE)
        self._state.last_command = line.strip()
        return classification

    # Passive tick ----------------------------------------------------------

    def tick(self, now: float | None = None) -> bool:
        """Fire the passive increment if a full period has elapsed."""
        if not self._state.running or self._state.mode != "in_game":
            return False
        if self._timer.poll(now):
            self.advance_tick()
            return True
        return False

    def advance_tick(self) -> None:
        if self._state.mode != "in_game":
            return
        self._state.ledger.apply(PASSIVE_EFFECT)

    def seconds_until_tick(self, now: float | None = None) -> float:
        return self._timer.remaining(now)

    # Menu transitions ------------------------------------------------------

    def select_slot(self, slot: int) -> None:
        """Load ``slot`` if it holds a save, otherwise start fresh in it."""
        self._require_slot(slot)
        self._state.reset_progress()
        self._state.slot = slot
        payload = self._read_payload(slot)
        snapshot = self._decode_slot(slot, payload) if payload is not None else None
        if payload is None:
            self._log(f"Slot {slot} is empty. Starting a new game.", Severity.INFO)
        elif snapshot is None:
            self._log(f"Slot {slot} could not be loaded. Starting a new game.", Severity.FAILURE)
        else:
            self._save_service.apply_snapshot(self._state, snapshot)
            self._log(f"Loaded slot {slot}.", Severity.SUCCESS)
        self._enter_game()

    def new_game(self, slot: int | None = None) -> None:
        """Start a fresh game bound to ``slot`` (first empty slot when None)."""
        if slot is None:
            slot = self._first_empty_slot()
        self._require_slot(slot)
        self._state.reset_progress()
        self._state.slot = slot
        self._log(f"New game started in slot {slot}.", Severity.SUCCESS)
        self._enter_game()

    # Tools -----------------------------------------------------------------

    def unlock_tool(self, tool: Tool) -> None:
        if self._state.mode != "in_game" or tool is Tool.NONE:
            return
        if tool not in self._state.unlocked_tools:
            self._state.unlocked_tools.append(tool)

    def equip(self, tool: Tool) -> bool:
        """Equip an unlocked tool; returns False when not allowed."""
        if self._state.mode != "in_game":
            return False
        if tool is not Tool.NONE and tool not in self._state.unlocked_tools:
            return False
        self._state.equipped_tool = tool
        return True

    # Persistence -----------------------------------------------------------

    def save(self) -> bool:
        """Best-effort save of the live session into its bound slot."""
        if self._store is None or self._state.slot is None:
            return False
        payload = self._save_service.serialize(self._state)
        try:
            self._store.write_slot(self._state.slot, payload)
        except (OSError, ValueError) as exc:
            log.warning("slot_save_failed", slot=self._state.slot, error=str(exc))
            return False
        log.info("slot_saved", slot=self._state.slot)
        return True

    # Rendering -------------------------------------------------------------

    def view(self, message_limit: int = DEFAULT_VIEW_MESSAGES) -> SessionView:
        state = self._state
        suggestions = (
            self._resolver.autocomplete(state.input_buffer) if state.mode == "in_game" else []
        )
        return SessionView(
            mode=state.mode,
            input_text=state.input_buffer,
            messages=state.log.since(state.cleared_through, message_limit),
            resources=state.ledger.snapshot(),
            tool=state.equipped_tool.label,
            area=state.current_area.label,
            suggestions=suggestions,
            slot=state.slot,
            running=state.running,
        )

    # Command effects -------------------------------------------------------

    def _do_collect(self, _line: str) -> None:
        self._state.ledger.apply(COLLECT_EFFECT)
        self._log("Collected 1 firestone", Severity.SUCCESS)

    def _do_mine(self, _line: str) -> None:
        if self._state.equipped_tool not in MINING_TOOLS:
            self._log("You need better mining tools!", Severity.FAILURE)
            return
        self._state.ledger.apply(MINE_EFFECT)
        self._log("Mined 2 emberash", Severity.SUCCESS)

    def _do_explore(self, _line: str) -> None:
        self._state.current_area = self._state.current_area.next()
        self._log(f"You explore onward to {self._state.current_area.label}.", Severity.INFO)

    def _do_craft(self, _line: str) -> None:
        # TODO: spend recipe costs through ResourceLedger.spend once recipes are defined.
        self._log("Nothing can be crafted yet.", Severity.INFO)

    def _do_help(self, _line: str) -> None:
        self._log("Commands:", Severity.INFO)
        for command in self._commands_repo.all():
            self._log(f"  {command.usage} - {command.help}", Severity.INFO)

    def _do_quit(self, _line: str) -> None:
        slot = self._state.slot
        if self.save():
            self._log(f"Game saved to slot {slot}.", Severity.SUCCESS)
        elif self._store is not None and slot is not None:
            self._log(f"Could not save to slot {slot}.", Severity.FAILURE)
        self._state.running = False

    def _do_about_usage(self, _line: str) -> None:
        usage = self._commands_repo.get("about").usage
        self._log(f"Usage: {usage}", Severity.INFO)

    def _do_clear(self, _line: str) -> None:
        self._state.cleared_through = self._state.log.last_sequence

    # Helpers ---------------------------------------------------------------

    def _handle_menu_line(self, line: str) -> None:
        text = line.strip().lower()
        if not text:
            return
        slot = self._parse_slot(text)
        if slot is not None:
            self.select_slot(slot)
            return
        parts = text.split()
        if parts[0] == "new" and len(parts) <= 2:
            if len(parts) == 1:
                self.new_game()
                return
            slot = self._parse_slot(parts[1])
            if slot is not None:
                self.new_game(slot)
                return
        if text in ("q", "quit"):
            self._state.running = False
            return
        self._log(
            f"Choose a slot (1-{self._save_service.slot_count}) or type 'new'.",
            Severity.FAILURE,
        )

    def _parse_slot(self, text: str) -> int | None:
        try:
            slot = int(text)
        except ValueError:
            return None
        if 1 <= slot <= self._save_service.slot_count:
            return slot
        return None

    def _show_menu(self) -> None:
        self._log("Welcome to Pyrobase.", Severity.INFO)
        for slot in range(1, self._save_service.slot_count + 1):
            payload = self._read_payload(slot)
            if payload is None:
                self._log(f"Slot {slot}: empty", Severity.INFO)
                continue
            area = payload.get("current_area")
            self._log(f"Slot {slot}: saved game ({area})", Severity.INFO)
        self._log(
            f"Select a save slot (1-{self._save_service.slot_count}) or type 'new' to start fresh.",
            Severity.INFO,
        )

    def _enter_game(self) -> None:
        self._state.mode = "in_game"
        self._timer.reset()

    def _first_empty_slot(self) -> int:
        for slot in range(1, self._save_service.slot_count + 1):
            if self._read_payload(slot) is None:
                return slot
        return 1

    def _read_payload(self, slot: int) -> SavePayload | None:
        if self._store is None:
            return None
        try:
            return self._store.read_slot(slot)
        except (OSError, ValueError) as exc:
            log.warning("slot_read_failed", slot=slot, error=str(exc))
            return None

    def _decode_slot(self, slot: int, payload: SavePayload) -> SlotSnapshot | None:
        try:
            snapshot = self._save_service.deserialize(payload)
        except SaveLoadError as exc:
            log.warning("slot_corrupt", slot=slot, error=str(exc))
            return None
        log.info("slot_loaded", slot=slot)
        return snapshot

    def _require_slot(self, slot: int) -> None:
        if not 1 <= slot <= self._save_service.slot_count:
            raise ValueError(f"Slot index must be between 1 and {self._save_service.slot_count}.")

    def _log(self, text: str, severity: Severity) -> None:
        self._state.log.append(text, severity)
