"""Service layer exports."""

from .command_resolver import (
    Classification,
    CommandResolver,
    EmptyInput,
    InfoResult,
    KnownCommand,
    NotFound,
    Suggestion,
    UnknownInput,
)
from .errors import SaveLoadError
from .game_session import GameSession, SessionView
from .save_service import SaveService

__all__ = [
    "Classification",
    "CommandResolver",
    "EmptyInput",
    "InfoResult",
    "KnownCommand",
    "NotFound",
    "Suggestion",
    "UnknownInput",
    "SaveLoadError",
    "GameSession",
    "SessionView",
    "SaveService",
]
