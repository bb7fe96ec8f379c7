"""Memory key-value store.

ONLY in-memory implementation - process-local store for memoized lazy
cache values. No TTL, no eviction, no persistence beyond process lifetime.
"""

import logging
import threading
from typing import Any, Callable, Dict, Hashable, List

from ...core.exceptions.store import CacheKeyNotFoundError
from ..concurrency.keyed_locks import KeyedLocks

logger = logging.getLogger(__name__)


class MemoryKeyValueStore:
    """Thread-safe in-memory key-value store."""

    def __init__(self):
        self._data: Dict[Hashable, Any] = {}
        self._lock = threading.RLock()
        self._key_locks = KeyedLocks()
        self._stats = {
            "hits": 0,
            "misses": 0,
            "puts": 0,
            "deletes": 0,
        }

    def exists(self, key: Hashable) -> bool:
        """Check if key holds a value."""
        with self._lock:
            return key in self._data

    def get(self, key: Hashable) -> Any:
        """Get value by key, raising CacheKeyNotFoundError when absent."""
        with self._lock:
            try:
                value = self._data[key]
            except KeyError:
                self._stats["misses"] += 1
                raise CacheKeyNotFoundError(key) from None
            self._stats["hits"] += 1
            return value

    def put(self, key: Hashable, value: Any) -> None:
        """Store value under key."""
        with self._lock:
            self._data[key] = value
            self._stats["puts"] += 1

    def delete(self, key: Hashable) -> bool:
        """Delete key if present."""
        with self._lock:
            if key in self._data:
                del self._data[key]
                self._stats["deletes"] += 1
                return True
            return False

    def fetch_or_compute(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        """Return stored value or compute, store and return it.

        ``compute`` runs outside the store lock, under a lock of its own key,
        so a slow computation only holds back callers of the same key.
        """
        with self._key_locks.hold(key):
            with self._lock:
                if key in self._data:
                    self._stats["hits"] += 1
                    return self._data[key]
                self._stats["misses"] += 1

            value = compute()

            with self._lock:
                self._data[key] = value
                self._stats["puts"] += 1
            return value

    def delete_where(self, predicate: Callable[[Hashable], bool]) -> int:
        """Delete all keys matching predicate."""
        with self._lock:
            matching = [key for key in self._data if predicate(key)]
            for key in matching:
                del self._data[key]
            self._stats["deletes"] += len(matching)
            return len(matching)

    def keys(self) -> List[Hashable]:
        """List stored keys."""
        with self._lock:
            return list(self._data.keys())

    def clear(self) -> None:
        """Clear all values."""
        with self._lock:
            self._data.clear()
            self._stats["deletes"] += 1  # Count as single delete operation
        logger.debug("Memory key-value store cleared")

    def get_stats(self) -> Dict[str, Any]:
        """Get store statistics."""
        with self._lock:
            total_requests = self._stats["hits"] + self._stats["misses"]
            hit_rate = (self._stats["hits"] / total_requests * 100) if total_requests > 0 else 0.0

            return {
                **self._stats,
                "total_keys": len(self._data),
                "hit_rate_percent": hit_rate,
                "total_requests": total_requests,
                "implementation": "memory",
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


# Factory function for dependency injection
def create_memory_key_value_store() -> MemoryKeyValueStore:
    """Create an empty memory key-value store."""
    return MemoryKeyValueStore()
