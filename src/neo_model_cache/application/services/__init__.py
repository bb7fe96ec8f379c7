"""Cache application services."""

from .accessor_binder import AccessorBinder, CacheAccessor
from .settings_resolver import SettingsResolver
from .lazy_cache_registry import LazyCacheRegistry
from .column_cache_registry import ColumnCacheRegistry

__all__ = [
    "AccessorBinder",
    "CacheAccessor",
    "SettingsResolver",
    "LazyCacheRegistry",
    "ColumnCacheRegistry",
]
