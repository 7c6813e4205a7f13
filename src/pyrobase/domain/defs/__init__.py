"""Domain definition exports."""

from .command_def import CommandDef
from .resource_def import ResourceDef

__all__ = ["CommandDef", "ResourceDef"]
