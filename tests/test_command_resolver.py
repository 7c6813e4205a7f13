from __future__ import annotations

import pytest

from pyrobase.data.repositories import CommandsRepository, ResourcesRepository
from pyrobase.services.command_resolver import (
    CommandResolver,
    EmptyInput,
    InfoResult,
    KnownCommand,
    NotFound,
    Suggestion,
    UnknownInput,
)


def _resolver() -> CommandResolver:
    return CommandResolver(CommandsRepository().vocabulary(), ResourcesRepository())


@pytest.mark.parametrize("line", ["collect", "  MINE ", "Help", "q", "Quit", "about", "clear"])
def test_exact_commands_are_known_case_insensitively(line: str) -> None:
    assert _resolver().classify(line) == KnownCommand(line.strip().lower())


@pytest.mark.parametrize("line", ["", "   ", "\t"])
def test_blank_input_is_empty(line: str) -> None:
    assert _resolver().classify(line) == EmptyInput()


def test_close_typo_is_suggested() -> None:
    assert _resolver().classify("colect") == Suggestion(text="colect", candidate="collect")


def test_suggestion_keeps_original_case_of_input() -> None:
    assert _resolver().classify(" Colect ") == Suggestion(text="Colect", candidate="collect")


def test_suggestion_uses_first_entry_within_threshold() -> None:
    resolver = CommandResolver(["mane", "mine"])
    # "mina" is distance 1 from "mine" but "mane" comes first at distance 2.
    assert resolver.classify("mina") == Suggestion(text="mina", candidate="mane")


def test_far_input_is_unknown() -> None:
    assert _resolver().classify("teleport") == UnknownInput(text="teleport")


def test_duplicate_vocabulary_entries_never_suggest_themselves() -> None:
    resolver = CommandResolver(["mine", "mine"])
    assert resolver.classify("mine") == KnownCommand("mine")
    assert resolver.classify("mien") == Suggestion(text="mien", candidate="mine")


def test_about_by_index() -> None:
    result = _resolver().classify("about 1")
    assert isinstance(result, InfoResult)
    assert result.text.startswith("Firestone: ")


def test_about_by_name_is_case_insensitive() -> None:
    result = _resolver().classify("about EMBERASH")
    assert isinstance(result, InfoResult)
    assert result.text.startswith("Emberash: ")


def test_about_multi_word_name() -> None:
    result = _resolver().classify("about sulfur ore")
    assert result == InfoResult(
        "Sulfur Ore: Required for crafting advanced tools."
    )


@pytest.mark.parametrize("line", ["about 0", "about 99", "about unobtainium"])
def test_about_without_match_is_not_found(line: str) -> None:
    assert isinstance(_resolver().classify(line), NotFound)


def test_about_without_resource_table_is_not_found() -> None:
    resolver = CommandResolver(["about"])
    assert resolver.classify("about 1") == NotFound("1")


def test_autocomplete_prefix_in_vocabulary_order() -> None:
    resolver = _resolver()
    assert resolver.autocomplete("c") == ["collect", "craft", "clear"]
    assert resolver.autocomplete("q") == ["quit", "q"]
    assert resolver.autocomplete("collect") == ["collect"]


def test_autocomplete_empty_partial_suggests_nothing() -> None:
    assert _resolver().autocomplete("") == []


def test_autocomplete_is_case_sensitive() -> None:
    assert _resolver().autocomplete("C") == []


def test_autocomplete_deduplicates() -> None:
    assert CommandResolver(["mine", "mine"]).autocomplete("m") == ["mine"]


def test_suggestion_threshold_is_two_edits() -> None:
    resolver = CommandResolver(["collect"])
    assert resolver.classify("cxxlect") == Suggestion(text="cxxlect", candidate="collect")
    assert resolver.classify("cxxxect") == UnknownInput(text="cxxxect")


def test_about_with_non_ascii_digit_is_not_found() -> None:
    assert _resolver().classify("about ²") == NotFound("²")
