"""Cache value objects."""

from .owner_ref import OwnerRef
from .cache_keys import LazyCacheKey, ColumnCacheKey, normalize_lookup_key
from .cache_method import CacheMethod

__all__ = [
    "OwnerRef",
    "LazyCacheKey",
    "ColumnCacheKey",
    "normalize_lookup_key",
    "CacheMethod",
]
