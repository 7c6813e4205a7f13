"""Shared type aliases for the core and domain layers."""
from typing import Literal

SessionMode = Literal["at_menu", "in_game"]

__all__ = ["SessionMode"]
