"""Cache policy protocol.

Extension point for TTL expiry, backend selection and negative-result
caching. Registries consult the policy on every store and every hit.
"""

from typing import Any
from typing_extensions import Protocol, runtime_checkable

from ..entities.cache_settings import CacheSettings
from ..entities.lazy_cache_entry import CachedValue
from ..value_objects.cache_keys import LazyCacheKey


@runtime_checkable
class CachePolicy(Protocol):
    """Cache policy protocol."""

    def should_store(self, settings: CacheSettings, key: LazyCacheKey, value: Any) -> bool:
        """Decide whether a freshly computed value is memoized."""
        ...

    def is_stale(self, settings: CacheSettings, cached: CachedValue) -> bool:
        """Decide whether a stored value must be recomputed."""
        ...
