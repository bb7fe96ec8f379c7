"""Lazy cache entities.

ONLY lazy cache state - a registered zero-argument computation and the
memoized value it produced.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable

from ..value_objects.cache_keys import LazyCacheKey


@dataclass(frozen=True)
class LazyCacheEntry:
    """A named computation registered for an owner."""

    key: LazyCacheKey
    compute: Callable[[], Any]

    @property
    def owner(self):
        return self.key.owner

    @property
    def name(self) -> str:
        return self.key.name

    def evaluate(self) -> Any:
        """Run the computation."""
        return self.compute()


@dataclass
class CachedValue:
    """Result of a lazy cache computation held in the key-value store.

    ``present`` stays True for a stored ``None``: the computation ran and its
    result is remembered until the key is invalidated.
    """

    key: LazyCacheKey
    value: Any
    present: bool = True
    stored_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def age_seconds(self) -> float:
        """Seconds elapsed since the value was stored."""
        return (datetime.now(timezone.utc) - self.stored_at).total_seconds()
