"""Repository for resource definitions."""
from __future__ import annotations

from typing import Dict

from pyrobase.data.errors import DataValidationError
from pyrobase.data.repositories.base import RepositoryBase
from pyrobase.domain.defs import ResourceDef


class ResourcesRepository(RepositoryBase[ResourceDef]):
    """Loads and validates the ordered resource table."""

    def __init__(self, base_path=None) -> None:
        super().__init__("resources.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ResourceDef]:
        definitions: Dict[str, ResourceDef] = {}
        for entry in self._build_entries(raw, "resources"):
            resource_id = self._require_str(entry.get("id"), "resource.id").strip()
            if resource_id.lower() != resource_id:
                raise DataValidationError(f"resource id '{resource_id}' must be lowercase.")
            name = self._require_str(entry.get("name"), f"resource '{resource_id}' name")
            description = self._require_str(
                entry.get("description"), f"resource '{resource_id}' description"
            )
            definitions[resource_id] = ResourceDef(id=resource_id, name=name, description=description)
        return definitions

    def ids(self) -> tuple[str, ...]:
        """Return resource ids in table order."""
        return tuple(resource.id for resource in self.all())

    def find(self, query: str) -> ResourceDef | None:
        """Look up a resource by 1-based table index, display name, or id."""
        query = query.strip()
        resources = self.all()
        try:
            index = int(query)
        except ValueError:
            index = 0
        if 1 <= index <= len(resources):
            return resources[index - 1]
        lowered = query.lower()
        for resource in resources:
            if resource.name.lower() == lowered or resource.id == lowered:
                return resource
        return None
