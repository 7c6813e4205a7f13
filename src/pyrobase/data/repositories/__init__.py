"""Repository exports."""

from .commands_repo import CommandsRepository
from .resources_repo import ResourcesRepository

__all__ = ["CommandsRepository", "ResourcesRepository"]
