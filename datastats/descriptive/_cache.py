"""
Per-statistic cache slots for the DataStats engine.

Each cached statistic owns a CachedStatistic holding its last value and a
validity flag. StatisticCache groups the six slots of one engine instance
and invalidates them together on every assignment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


CACHED_STATISTICS = ('min', 'max', 'mean', 'std', 'median', 'mode')


@dataclass
class CachedStatistic:
    """
    One cache slot: a value plus a validity flag.

    The slot starts invalid with value 0.0. get() recomputes only when the
    slot is invalid, then marks it valid until the next invalidate().
    """
    value: float = 0.0
    valid: bool = False

    def get(self, compute: Callable[[], float]) -> float:
        if not self.valid:
            self.value = compute()
            self.valid = True
        return self.value

    def invalidate(self) -> None:
        self.valid = False


class StatisticCache:
    """The six cache slots of one engine instance."""

    def __init__(self):
        self._slots = {name: CachedStatistic() for name in CACHED_STATISTICS}

    def __getitem__(self, name: str) -> CachedStatistic:
        return self._slots[name]

    def invalidate_all(self) -> None:
        for slot in self._slots.values():
            slot.invalidate()

    def valid_names(self) -> list[str]:
        """Names of slots currently holding a valid value."""
        return [name for name, slot in self._slots.items() if slot.valid]
