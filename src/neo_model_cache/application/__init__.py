"""Cache application layer."""

from .services import *

__all__ = [
    "AccessorBinder",
    "CacheAccessor",
    "SettingsResolver",
    "LazyCacheRegistry",
    "ColumnCacheRegistry",
]
