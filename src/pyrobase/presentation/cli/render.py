"""Curses drawing helpers for the session view."""
from __future__ import annotations

import curses
import textwrap
from typing import Dict, List, Sequence

from pyrobase.domain.message_log import Message
from pyrobase.domain.world_models import Severity
from pyrobase.services.game_session import SessionView

COLOR_PAIR_INFO = 1
COLOR_PAIR_SUCCESS = 2
COLOR_PAIR_FAILURE = 3
COLOR_PAIR_HIGHLIGHT = 4

_SEVERITY_PAIRS: Dict[Severity, int] = {
    Severity.INFO: COLOR_PAIR_INFO,
    Severity.SUCCESS: COLOR_PAIR_SUCCESS,
    Severity.FAILURE: COLOR_PAIR_FAILURE,
}


def init_colors() -> None:
    """Register color pairs when the terminal supports them."""
    if not curses.has_colors():
        return
    curses.start_color()
    try:
        curses.use_default_colors()
    except curses.error:
        pass
    curses.init_pair(COLOR_PAIR_INFO, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_PAIR_SUCCESS, curses.COLOR_GREEN, -1)
    curses.init_pair(COLOR_PAIR_FAILURE, curses.COLOR_RED, -1)
    curses.init_pair(COLOR_PAIR_HIGHLIGHT, curses.COLOR_YELLOW, -1)


def severity_pair(severity: Severity) -> int:
    return _SEVERITY_PAIRS.get(severity, COLOR_PAIR_INFO)


def wrap_text_for_box(text: str, width: int) -> list[str]:
    """Wrap text to fit within a fixed width, breaking on word boundaries."""
    if not text or width <= 0:
        return [text] if text else [""]
    return textwrap.wrap(
        text,
        width=width,
        subsequent_indent="  ",
        break_long_words=True,
        break_on_hyphens=False,
    ) or [""]


def format_resource_lines(resources: Dict[str, int], names: Dict[str, str]) -> List[str]:
    """Return ``Name: amount`` lines in ledger order."""
    return [f"{names.get(resource_id, resource_id)}: {amount}" for resource_id, amount in resources.items()]


def format_status_line(view: SessionView) -> str:
    if view.mode == "at_menu":
        return "Pyrobase - choose a save slot"
    slot = f"Slot {view.slot}" if view.slot is not None else "No slot"
    return f"Pyrobase | {slot} | Area: {view.area} | Tool: {view.tool}"


def format_message_rows(messages: Sequence[Message], width: int, height: int) -> List[tuple[str, Severity]]:
    """Lay out newest-first messages as wrapped rows, newest at the top."""
    rows: List[tuple[str, Severity]] = []
    for message in messages:
        for line in wrap_text_for_box(message.text, width):
            rows.append((line, message.severity))
            if len(rows) >= height:
                return rows
    return rows


def draw_screen(stdscr: curses.window, view: SessionView, names: Dict[str, str]) -> None:
    """Redraw the whole screen from ``view``."""
    stdscr.erase()
    max_y, max_x = stdscr.getmaxyx()
    if max_y < 8 or max_x < 30:
        _safe_addstr(stdscr, 0, 0, "Please enlarge your terminal.")
        stdscr.refresh()
        return

    _safe_addstr(stdscr, 0, 0, format_status_line(view)[: max_x - 1], curses.A_BOLD)

    body_top = 1
    input_height = 4
    body_height = max_y - body_top - input_height
    left_width = max(20, max_x * 3 // 10)
    right_width = max_x - left_width

    resources_win = stdscr.derwin(body_height, left_width, body_top, 0)
    resources_win.box()
    _safe_addstr(resources_win, 0, 2, " Resources ")
    for index, line in enumerate(format_resource_lines(view.resources, names)):
        if index >= body_height - 2:
            break
        _safe_addstr(resources_win, index + 1, 1, line[: left_width - 2])

    messages_win = stdscr.derwin(body_height, right_width, body_top, left_width)
    messages_win.box()
    _safe_addstr(messages_win, 0, 2, " Output ")
    rows = format_message_rows(view.messages, right_width - 2, body_height - 2)
    for index, (line, severity) in enumerate(rows):
        _safe_addstr(messages_win, index + 1, 1, line[: right_width - 2], _color(severity_pair(severity)))

    input_win = stdscr.derwin(input_height, max_x, body_top + body_height, 0)
    input_win.box()
    _safe_addstr(input_win, 0, 2, " Commands ")
    _safe_addstr(input_win, 1, 1, f"> {view.input_text}"[: max_x - 2])
    if view.suggestions:
        hint = "Suggestions: " + ", ".join(view.suggestions)
        _safe_addstr(input_win, 2, 1, hint[: max_x - 2], _color(COLOR_PAIR_HIGHLIGHT))

    stdscr.refresh()


def _color(pair: int) -> int:
    if not curses.has_colors():
        return curses.A_NORMAL
    return curses.color_pair(pair)


def _safe_addstr(win: curses.window, y: int, x: int, text: str, attr: int = curses.A_NORMAL) -> None:
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass
