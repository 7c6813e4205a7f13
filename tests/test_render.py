from pyrobase.domain.message_log import Message
from pyrobase.domain.world_models import Severity
from pyrobase.presentation.cli import render
from pyrobase.services.game_session import SessionView


def _view(**overrides) -> SessionView:
    values = dict(
        mode="in_game",
        input_text="",
        messages=[],
        resources={"firestone": 3, "emberash": 0},
        tool="Blaze Hammer",
        area="Ember Fields",
        suggestions=[],
        slot=2,
        running=True,
    )
    values.update(overrides)
    return SessionView(**values)


def test_severity_pairs_are_distinct() -> None:
    pairs = {render.severity_pair(severity) for severity in Severity}
    assert len(pairs) == len(Severity)


def test_format_resource_lines_uses_display_names() -> None:
    lines = render.format_resource_lines({"firestone": 3, "emberash": 0}, {"firestone": "Firestone"})
    assert lines == ["Firestone: 3", "emberash: 0"]


def test_status_line_in_game_and_menu() -> None:
    assert render.format_status_line(_view()) == "Pyrobase | Slot 2 | Area: Ember Fields | Tool: Blaze Hammer"
    assert "choose a save slot" in render.format_status_line(_view(mode="at_menu"))


def test_message_rows_wrap_and_clip() -> None:
    messages = [
        Message(text="one two three four", severity=Severity.SUCCESS, sequence=2),
        Message(text="older", severity=Severity.FAILURE, sequence=1),
    ]
    rows = render.format_message_rows(messages, width=10, height=2)
    assert rows == [("one two", Severity.SUCCESS), ("  three", Severity.SUCCESS)]


def test_wrap_text_handles_empty() -> None:
    assert render.wrap_text_for_box("", 10) == [""]
