"""Classification of free-text command lines."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Union

from rapidfuzz.distance import Levenshtein

from pyrobase.data.repositories import ResourcesRepository

SUGGESTION_MAX_DISTANCE = 2
ABOUT_KEYWORD = "about"


@dataclass(frozen=True, slots=True)
class EmptyInput:
    """Nothing but whitespace was submitted."""


@dataclass(frozen=True, slots=True)
class KnownCommand:
    name: str


@dataclass(frozen=True, slots=True)
class InfoResult:
    """An ``about`` lookup that found a resource."""

    text: str


@dataclass(frozen=True, slots=True)
class NotFound:
    """An ``about`` lookup that matched nothing."""

    query: str


@dataclass(frozen=True, slots=True)
class Suggestion:
    text: str
    candidate: str


@dataclass(frozen=True, slots=True)
class UnknownInput:
    text: str


Classification = Union[EmptyInput, KnownCommand, InfoResult, NotFound, Suggestion, UnknownInput]


class CommandResolver:
    """Resolves input lines against an ordered command vocabulary."""

    def __init__(
        self,
        vocabulary: Iterable[str],
        resources_repo: ResourcesRepository | None = None,
        *,
        max_distance: int = SUGGESTION_MAX_DISTANCE,
    ) -> None:
        self._vocabulary: tuple[str, ...] = tuple(vocabulary)
        self._resources_repo = resources_repo
        self._max_distance = max_distance

    @property
    def vocabulary(self) -> tuple[str, ...]:
        return self._vocabulary

    def classify(self, raw_line: str) -> Classification:
        text = raw_line.strip()
        if not text:
            return EmptyInput()
        lowered = text.lower()
        if lowered in self._vocabulary:
            return KnownCommand(lowered)
        if lowered.startswith(ABOUT_KEYWORD + " "):
            return self._lookup(text[len(ABOUT_KEYWORD):].strip())
        for entry in self._vocabulary:
            distance = Levenshtein.distance(lowered, entry)
            # An exact hit already returned above; duplicates must not suggest themselves.
            if 0 < distance <= self._max_distance:
                return Suggestion(text=text, candidate=entry)
        return UnknownInput(text=text)

    def autocomplete(self, partial: str) -> List[str]:
        """Return vocabulary entries that start with ``partial``, in order."""
        if not partial:
            return []
        matches: List[str] = []
        for entry in self._vocabulary:
            if entry.startswith(partial) and entry not in matches:
                matches.append(entry)
        return matches

    def _lookup(self, query: str) -> InfoResult | NotFound:
        if self._resources_repo is None:
            return NotFound(query)
        resource = self._resources_repo.find(query)
        if resource is None:
            return NotFound(query)
        return InfoResult(f"{resource.name}: {resource.description}")

