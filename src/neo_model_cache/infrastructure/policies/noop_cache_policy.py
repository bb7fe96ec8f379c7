"""No-op cache policy.

Default policy: every computed value is stored and nothing ever goes stale,
which leaves ``ttl`` and ``cache_method`` settings inert.
"""

from typing import Any

from ...core.entities.cache_settings import CacheSettings
from ...core.entities.lazy_cache_entry import CachedValue
from ...core.value_objects.cache_keys import LazyCacheKey


class NoOpCachePolicy:
    """Cache policy that stores everything and never expires."""

    def should_store(self, settings: CacheSettings, key: LazyCacheKey, value: Any) -> bool:
        return True

    def is_stale(self, settings: CacheSettings, cached: CachedValue) -> bool:
        return False
