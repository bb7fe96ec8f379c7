"""Cache entities."""

from .lazy_cache_entry import LazyCacheEntry, CachedValue
from .column_cache_entry import ColumnCacheEntry, ColumnCacheTable
from .cache_settings import CacheSettings

__all__ = [
    "LazyCacheEntry",
    "CachedValue",
    "ColumnCacheEntry",
    "ColumnCacheTable",
    "CacheSettings",
]
