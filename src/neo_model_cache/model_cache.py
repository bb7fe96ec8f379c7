"""Model cache facade.

Main entry point: wires the key-value store, registries, accessor binder,
settings resolver and cache policy together, and exposes the public
register/fetch/invalidate operations.

Example:
    register_lazy_cache(User, "featured", lambda: db.find_featured())
    User.featured()                       # computes and caches
    User.featured()                       # cached
    invalidate_lazy_cache(User, "featured")

    register_column_cache(User, "email", db.find_by_email, {"as": "by_email"})
    User.by_email("a@x.com")
"""

import logging
import threading
from typing import Any, Callable, Dict, Optional

from .application.services.accessor_binder import AccessorBinder
from .application.services.column_cache_registry import ColumnCacheRegistry
from .application.services.lazy_cache_registry import LazyCacheRegistry
from .application.services.settings_resolver import SettingsResolver
from .config.settings import ModelCacheDefaults
from .core.entities.cache_settings import CacheSettings
from .core.protocols.cache_policy import CachePolicy
from .core.protocols.key_value_store import KeyValueStore
from .infrastructure.concurrency.keyed_locks import KeyedLocks
from .infrastructure.policies.noop_cache_policy import NoOpCachePolicy
from .infrastructure.stores.memory_key_value_store import MemoryKeyValueStore

logger = logging.getLogger(__name__)


class ModelCache:
    """Lazy and column caches for model classes.

    Each ModelCache owns its own store, tables and accessor dispatch table;
    two instances never share cached values.
    """

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        defaults: Optional[ModelCacheDefaults] = None,
        policy: Optional[CachePolicy] = None
    ):
        """Initialize model cache.

        Args:
            store: Store for memoized lazy values (default: in-memory)
            defaults: Process-wide setting defaults (default: from environment)
            policy: Cache policy (default: no-op, settings stay inert)
        """
        self.store = store if store is not None else MemoryKeyValueStore()
        self.binder = AccessorBinder()
        self.settings = SettingsResolver(defaults)
        self.policy = policy or NoOpCachePolicy()
        locks = KeyedLocks()
        self.lazy = LazyCacheRegistry(self.store, self.binder, self.settings, self.policy, locks)
        self.columns = ColumnCacheRegistry(self.binder, self.settings, locks)

    def register_lazy_cache(
        self,
        owner: Any,
        name: str,
        compute: Optional[Callable[[], Any]],
        options: Optional[Dict[str, Any]] = None
    ) -> None:
        """Register a named lazy cache on the owner."""
        self.lazy.register(owner, name, compute, options)

    def fetch_lazy_cache(self, owner: Any, name: str) -> Any:
        return self.lazy.fetch(owner, name)

    def invalidate_lazy_cache(self, owner: Any, name: Optional[str] = None) -> int:
        """Drop one (``name`` given) or all cached lazy values of the owner."""
        return self.lazy.invalidate(owner, name)

    def register_column_cache(
        self,
        owner: Any,
        column: str,
        lookup: Optional[Callable[[str], Optional[Any]]] = None,
        options: Optional[Dict[str, Any]] = None
    ) -> None:
        """Register a column cache on the owner.

        The accessor name is taken from ``options["as"]`` and defaults to the
        column name. Remaining options are cache setting overrides.
        """
        options = dict(options or {})
        accessor_name = options.pop("as", None)
        self.columns.register(owner, column, lookup, accessor_name=accessor_name, options=options)

    def fetch_column_cache(self, owner: Any, column: str, key: Any) -> Optional[Any]:
        return self.columns.fetch(owner, column, key)

    def get_settings(self, owner: Any) -> CacheSettings:
        """Get effective cache settings of the owner."""
        return self.settings.get_settings(owner)

    def get_stats(self) -> Dict[str, Any]:
        return self.store.get_stats()

    def reset(self) -> None:
        """Remove all registrations, accessors, cached values and overrides."""
        owners = self.binder.owners()
        self.lazy.unregister_all()
        self.columns.unregister_all()
        self.store.clear()
        for owner in owners:
            self.settings.forget(owner)
        logger.info("Model cache reset")


_default_model_cache: Optional[ModelCache] = None
_default_lock = threading.Lock()


def get_default_model_cache() -> ModelCache:
    """Get the process-wide ModelCache, creating it on first use."""
    global _default_model_cache
    with _default_lock:
        if _default_model_cache is None:
            _default_model_cache = ModelCache()
        return _default_model_cache


def reset_default_model_cache() -> None:
    """Reset and discard the process-wide ModelCache."""
    global _default_model_cache
    with _default_lock:
        cache, _default_model_cache = _default_model_cache, None
    if cache is not None:
        cache.reset()


def register_lazy_cache(
    owner: Any,
    name: str,
    compute: Optional[Callable[[], Any]],
    options: Optional[Dict[str, Any]] = None
) -> None:
    get_default_model_cache().register_lazy_cache(owner, name, compute, options)


def fetch_lazy_cache(owner: Any, name: str) -> Any:
    return get_default_model_cache().fetch_lazy_cache(owner, name)


def invalidate_lazy_cache(owner: Any, name: Optional[str] = None) -> int:
    return get_default_model_cache().invalidate_lazy_cache(owner, name)


def register_column_cache(
    owner: Any,
    column: str,
    lookup: Optional[Callable[[str], Optional[Any]]] = None,
    options: Optional[Dict[str, Any]] = None
) -> None:
    get_default_model_cache().register_column_cache(owner, column, lookup, options)


def fetch_column_cache(owner: Any, column: str, key: Any) -> Optional[Any]:
    return get_default_model_cache().fetch_column_cache(owner, column, key)


def get_settings(owner: Any) -> CacheSettings:
    return get_default_model_cache().get_settings(owner)
