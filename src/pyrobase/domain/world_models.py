"""Closed sets of tools, areas and message severities."""
from __future__ import annotations

from enum import Enum


class Tool(Enum):
    """Tools the player can unlock and equip."""

    NONE = "none"
    FLAMESTARTER = "Flamestarter"
    BLAZE_HAMMER = "BlazeHammer"
    MOLTEN_CUTTER = "MoltenCutter"
    PYRODRILL = "Pyrodrill"
    FIRE_MANIPULATOR = "FireManipulator"
    PHOENIX_BEACON = "PhoenixBeacon"

    @property
    def label(self) -> str:
        return _split_camel(self.value) if self is not Tool.NONE else "None"


class Area(Enum):
    """Areas of the volcanic map, in travel order."""

    SCORCHED_PLAINS = "ScorchedPlains"
    EMBER_FIELDS = "EmberFields"
    FLAMEFORGE_RUINS = "FlameforgeRuins"
    INFERNO_WELLS = "InfernoWells"
    PYRO_NEXUS = "PyroNexus"

    @property
    def label(self) -> str:
        return _split_camel(self.value)

    def next(self) -> "Area":
        """Return the following area, wrapping back to the first."""
        members = list(Area)
        return members[(members.index(self) + 1) % len(members)]


class Severity(Enum):
    """Tone of a log message; the renderer chooses how to display it."""

    INFO = "info"
    SUCCESS = "success"
    FAILURE = "failure"


MINING_TOOLS: frozenset[Tool] = frozenset({Tool.BLAZE_HAMMER, Tool.PYRODRILL})
STARTING_TOOL = Tool.FLAMESTARTER
STARTING_AREA = Area.SCORCHED_PLAINS


def _split_camel(value: str) -> str:
    words: list[str] = []
    for char in value:
        if char.isupper() and words:
            words.append(" ")
        words.append(char)
    return "".join(words)
