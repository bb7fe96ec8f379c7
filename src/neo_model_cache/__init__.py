"""neo-model-cache.

Lazy (named, memoized) caches and column (keyed lookup) caches for model
classes, with per-owner isolation and a pluggable cache policy.
"""

import logging

from .__version__ import __version__

from .core import *
from .infrastructure import *
from .application import *
from .config import ModelCacheDefaults, get_model_cache_defaults, setup_logging

from .model_cache import (
    ModelCache,
    get_default_model_cache,
    reset_default_model_cache,
    register_lazy_cache,
    fetch_lazy_cache,
    invalidate_lazy_cache,
    register_column_cache,
    fetch_column_cache,
    get_settings,
)
from .mixins import CachedModelMixin

# Library code never configures handlers; applications call setup_logging()
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",

    # Public surface
    "ModelCache",
    "CachedModelMixin",
    "get_default_model_cache",
    "reset_default_model_cache",
    "register_lazy_cache",
    "fetch_lazy_cache",
    "invalidate_lazy_cache",
    "register_column_cache",
    "fetch_column_cache",
    "get_settings",

    # Configuration
    "ModelCacheDefaults",
    "get_model_cache_defaults",
    "setup_logging",

    # Core
    "LazyCacheEntry",
    "CachedValue",
    "ColumnCacheEntry",
    "ColumnCacheTable",
    "CacheSettings",
    "OwnerRef",
    "LazyCacheKey",
    "ColumnCacheKey",
    "normalize_lookup_key",
    "CacheMethod",
    "KeyValueStore",
    "CachePolicy",
    "RecordSource",

    # Exceptions
    "ModelCacheError",
    "create_error_response",
    "RegistrationError",
    "MissingComputationError",
    "MissingLookupError",
    "DuplicateNameError",
    "InvalidCacheOptionsError",
    "CacheKeyError",
    "CacheKeyNotFoundError",
    "InvalidOwnerError",

    # Infrastructure
    "MemoryKeyValueStore",
    "create_memory_key_value_store",
    "KeyedLocks",
    "NoOpCachePolicy",

    # Application services
    "AccessorBinder",
    "CacheAccessor",
    "SettingsResolver",
    "LazyCacheRegistry",
    "ColumnCacheRegistry",
]
