"""Key-value store protocol.

ONLY store contract - defines the interface for the process-wide store that
holds memoized lazy cache values.
"""

from typing import Any, Callable, Dict, Hashable, List
from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Key-value store protocol.

    Keys are opaque hashables, values arbitrary. A ``put`` is visible to every
    later ``get``/``exists`` on the same store instance.
    """

    def exists(self, key: Hashable) -> bool:
        """Check if key holds a value (a stored None counts)."""
        ...

    def get(self, key: Hashable) -> Any:
        """Get value by key.

        Raises CacheKeyNotFoundError if the key holds no value; check
        ``exists`` first or use ``fetch_or_compute``.
        """
        ...

    def put(self, key: Hashable, value: Any) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def delete(self, key: Hashable) -> bool:
        """Delete key. Returns True if a value was removed; never raises."""
        ...

    def fetch_or_compute(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        """Return the stored value, or compute, store and return it."""
        ...

    def delete_where(self, predicate: Callable[[Hashable], bool]) -> int:
        """Delete every key matching predicate. Returns number removed."""
        ...

    def keys(self) -> List[Hashable]:
        """List all keys currently holding a value."""
        ...

    def clear(self) -> None:
        """Remove all values."""
        ...

    def get_stats(self) -> Dict[str, Any]:
        """Get store statistics."""
        ...
