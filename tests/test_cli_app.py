import curses

from pyrobase.presentation.cli import app
from pyrobase.presentation.cli.save_slots import SaveFileStore
from pyrobase.services.game_session import KEY_BACKSPACE, KEY_ENTER, KEY_ESCAPE


def test_translate_key_maps_control_keys() -> None:
    assert app.translate_key("\n") == KEY_ENTER
    assert app.translate_key(curses.KEY_ENTER) == KEY_ENTER
    assert app.translate_key("\x7f") == KEY_BACKSPACE
    assert app.translate_key(curses.KEY_BACKSPACE) == KEY_BACKSPACE
    assert app.translate_key("\x1b") == KEY_ESCAPE


def test_translate_key_passes_printable_characters() -> None:
    assert app.translate_key("a") == "a"
    assert app.translate_key(" ") == " "


def test_translate_key_ignores_other_keys() -> None:
    assert app.translate_key(curses.KEY_UP) is None
    assert app.translate_key("\x01") is None


def test_build_session_honours_options(tmp_path) -> None:
    store = SaveFileStore(tmp_path / "saves.json")
    session = app.build_session({"tick_ms": 100, "show_menu": False}, store=store)
    assert session.state.mode == "in_game"
    session.handle_line("collect")
    session.handle_line("quit")
    assert store.read_slot(1)["resources"]["firestone"] == 1


def test_build_session_starts_at_menu_by_default(tmp_path) -> None:
    session = app.build_session({}, store=SaveFileStore(tmp_path / "saves.json"))
    assert session.state.mode == "at_menu"


def test_build_session_exposes_resource_table(tmp_path) -> None:
    session = app.build_session({}, store=SaveFileStore(tmp_path / "saves.json"))
    names = [resource.name for resource in session.resources_repo.all()]
    assert names[0] == "Firestone"
