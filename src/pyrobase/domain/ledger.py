"""Named resource counters."""
from __future__ import annotations

from typing import Dict, Iterable, Mapping

RESOURCE_IDS: tuple[str, ...] = (
    "firestone",
    "emberash",
    "heatcores",
    "sulfur_ore",
    "charcoal_essence",
    "ashen_dust",
)
COUNTER_MAX = 2**64 - 1


class ResourceLedger:
    """Non-negative, saturating counters keyed by resource id."""

    def __init__(self, resource_ids: Iterable[str] = RESOURCE_IDS) -> None:
        self._counters: Dict[str, int] = {resource_id: 0 for resource_id in resource_ids}

    @property
    def resource_ids(self) -> tuple[str, ...]:
        return tuple(self._counters)

    def get(self, resource_id: str) -> int:
        self._require_known(resource_id)
        return self._counters[resource_id]

    def apply(self, effect: Mapping[str, int]) -> None:
        """Add each increment in ``effect``, saturating at COUNTER_MAX."""
        self._validate(effect)
        for resource_id, amount in effect.items():
            self._counters[resource_id] = min(COUNTER_MAX, self._counters[resource_id] + amount)

    def spend(self, cost: Mapping[str, int]) -> bool:
        """Subtract ``cost`` only if every counter can cover it.

        Returns False and leaves the ledger untouched when any counter is short.
        """
        self._validate(cost)
        if any(self._counters[resource_id] < amount for resource_id, amount in cost.items()):
            return False
        for resource_id, amount in cost.items():
            self._counters[resource_id] -= amount
        return True

    def reset(self) -> None:
        for resource_id in self._counters:
            self._counters[resource_id] = 0

    def snapshot(self) -> Dict[str, int]:
        return dict(self._counters)

    def restore(self, values: Mapping[str, int]) -> None:
        """Replace counters with ``values``; ids absent from ``values`` become zero."""
        self._validate(values)
        self.reset()
        for resource_id, amount in values.items():
            self._counters[resource_id] = min(COUNTER_MAX, amount)

    def _validate(self, values: Mapping[str, int]) -> None:
        for resource_id, amount in values.items():
            self._require_known(resource_id)
            if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
                raise ValueError(f"Amount for '{resource_id}' must be a non-negative integer.")

    def _require_known(self, resource_id: str) -> None:
        if resource_id not in self._counters:
            raise KeyError(resource_id)
