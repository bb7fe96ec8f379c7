"""Column cache entities.

ONLY column cache state - the registered lookup for a column and the table
of records resolved through it.
"""

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from ..value_objects.cache_keys import ColumnCacheKey


@dataclass(frozen=True)
class ColumnCacheEntry:
    """A lookup registered for (owner, column) under an accessor name."""

    key: ColumnCacheKey
    accessor_name: str
    lookup: Callable[[str], Optional[Any]]

    @property
    def owner(self):
        return self.key.owner

    @property
    def column(self) -> str:
        return self.key.column


@dataclass
class ColumnCacheTable:
    """Mapping from normalized lookup key to resolved record.

    Only present records are ever stored, so a table hit is always a record.
    Entries are never evicted.
    """

    key: ColumnCacheKey
    _records: Dict[str, Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    def contains(self, lookup_key: str) -> bool:
        with self._lock:
            return lookup_key in self._records

    def get(self, lookup_key: str) -> Optional[Any]:
        with self._lock:
            return self._records.get(lookup_key)

    def store(self, lookup_key: str, record: Any) -> None:
        """Store a resolved record; absent results are rejected."""
        if record is None:
            raise ValueError("Column cache tables only hold present records")
        with self._lock:
            self._records[lookup_key] = record

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._records.keys())

    def clear(self) -> int:
        with self._lock:
            count = len(self._records)
            self._records.clear()
            return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
