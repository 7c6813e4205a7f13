"""Curses event loop around the game session."""
from __future__ import annotations

import curses
from typing import Any, Dict

from pyrobase.core.log import configure_logging, get_logger
from pyrobase.data.repositories import CommandsRepository, ResourcesRepository
from pyrobase.presentation.cli import config, render
from pyrobase.presentation.cli.save_slots import SaveFileStore
from pyrobase.services.game_session import (
    KEY_BACKSPACE,
    KEY_ENTER,
    KEY_ESCAPE,
    GameSession,
)
from pyrobase.services.save_service import SaveService

log = get_logger(__name__)

_ESC_DELAY_MS = 25
_ENTER_KEYS = {"\n", "\r", curses.KEY_ENTER, 10, 13}
_BACKSPACE_KEYS = {"\b", "\x7f", curses.KEY_BACKSPACE, 8, 127}
_ESCAPE_KEYS = {"\x1b", 27}


def main() -> None:
    """Start the interactive terminal session."""
    options = config.load_config()
    stream = configure_logging(config.get_log_path())
    try:
        log.info("pyrobase_starting", **options)
        curses.wrapper(_run, options)
    finally:
        log.info("pyrobase_stopped")
        stream.close()


def build_session(options: Dict[str, Any], store: SaveFileStore | None = None) -> GameSession:
    """Construct a GameSession with concrete repositories and storage."""
    commands_repo = CommandsRepository()
    resources_repo = ResourcesRepository()
    save_service = SaveService(resources_repo.ids())
    if store is None:
        store = SaveFileStore(config.get_save_path(), save_service)
    return GameSession(
        commands_repo=commands_repo,
        resources_repo=resources_repo,
        save_service=save_service,
        store=store,
        has_menu=bool(options.get("show_menu", True)),
        tick_period=int(options.get("tick_ms", 50)) / 1000,
    )


def translate_key(key: object) -> str | None:
    """Map a curses ``get_wch`` result onto a session key, or None to ignore it."""
    if key in _ENTER_KEYS:
        return KEY_ENTER
    if key in _BACKSPACE_KEYS:
        return KEY_BACKSPACE
    if key in _ESCAPE_KEYS:
        return KEY_ESCAPE
    if isinstance(key, str) and len(key) == 1 and key.isprintable():
        return key
    return None


def _run(stdscr: curses.window, options: Dict[str, Any]) -> None:
    _init_screen(stdscr)
    session = build_session(options)
    names = {resource.id: resource.name for resource in session.resources_repo.all()}
    while session.running:
        render.draw_screen(stdscr, session.view(), names)
        wait_ms = max(1, int(session.seconds_until_tick() * 1000))
        stdscr.timeout(wait_ms)
        try:
            key = stdscr.get_wch()
        except curses.error:
            key = None
        if key is not None:
            translated = translate_key(key)
            if translated is not None:
                session.handle_key(translated)
        session.tick()


def _init_screen(stdscr: curses.window) -> None:
    try:
        curses.set_escdelay(_ESC_DELAY_MS)
    except (AttributeError, curses.error):
        pass
    curses.noecho()
    curses.cbreak()
    stdscr.keypad(True)
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    render.init_colors()
