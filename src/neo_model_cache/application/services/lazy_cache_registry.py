"""Lazy cache registry.

ONLY lazy cache orchestration - registers named zero-argument computations
per owner and memoizes their results in the key-value store.

Fetch is a three-way branch:
- hit: a value is stored for (owner, name), return it
- compute-and-cache: a computation is registered, run it, store, return
- total miss: nothing registered, return None
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from ...core.entities.cache_settings import CacheSettings
from ...core.entities.lazy_cache_entry import CachedValue, LazyCacheEntry
from ...core.exceptions.registration import MissingComputationError
from ...core.exceptions.store import CacheKeyNotFoundError
from ...core.protocols.cache_policy import CachePolicy
from ...core.protocols.key_value_store import KeyValueStore
from ...core.value_objects.cache_keys import LazyCacheKey
from ...core.value_objects.owner_ref import OwnerRef
from ...infrastructure.concurrency.keyed_locks import KeyedLocks
from ...infrastructure.policies.noop_cache_policy import NoOpCachePolicy
from .accessor_binder import AccessorBinder
from .settings_resolver import SettingsResolver

logger = logging.getLogger(__name__)


class LazyCacheRegistry:
    """Per-owner table of named, memoized computations.

    A computation returning None (or any falsy value) is memoized like any
    other result; only invalidation makes it run again.
    """

    def __init__(
        self,
        store: KeyValueStore,
        binder: AccessorBinder,
        settings: SettingsResolver,
        policy: Optional[CachePolicy] = None,
        locks: Optional[KeyedLocks] = None
    ):
        """Initialize lazy cache registry.

        Args:
            store: Store holding memoized values
            binder: Binder used to install owner accessors
            settings: Resolver for per-owner cache settings
            policy: Cache policy consulted on store and hit (default: no-op)
            locks: Per-key locks serializing first-time computation
        """
        self._store = store
        self._binder = binder
        self._settings = settings
        self._policy = policy or NoOpCachePolicy()
        self._locks = locks or KeyedLocks()
        self._entries: Dict[LazyCacheKey, LazyCacheEntry] = {}
        self._lock = threading.RLock()

    def register(
        self,
        owner: Any,
        name: str,
        compute: Optional[Callable[[], Any]],
        options: Optional[Dict[str, Any]] = None
    ) -> None:
        """Register a lazy cache and install ``owner.<name>()``.

        Raises:
            MissingComputationError: if compute is missing or not callable
            DuplicateNameError: if ``name`` already resolves on the owner
            InvalidCacheOptionsError: if options fail validation
        """
        owner = OwnerRef.of(owner)
        if compute is None or not callable(compute):
            raise MissingComputationError.for_lazy_cache(owner.display_name, str(name), compute)

        with self._lock:
            self._binder.validate_name(owner, name)
            settings = self._settings.resolve(owner, options)

            key = LazyCacheKey(owner, name)

            def accessor():
                return self.fetch(owner, name)

            self._binder.install_accessor(
                owner, name, accessor,
                doc=f"Lazily computed and cached value {name!r} of {owner.display_name}."
            )
            self._entries[key] = LazyCacheEntry(key=key, compute=compute)
            self._settings.apply(owner, settings)

        logger.info(f"Registered lazy cache {owner.display_name}.{name}")

    def fetch(self, owner: Any, name: str) -> Any:
        """Get the memoized value, computing it on first use.

        Returns None on a total miss (no value stored and nothing registered).
        Exceptions raised by the computation propagate and nothing is stored.
        """
        owner = OwnerRef.of(owner)
        key = LazyCacheKey(owner, name)
        settings = self._settings.get_settings(owner)

        cached = self._read_cached(key, settings)
        if cached is not None:
            logger.debug(f"Lazy cache hit: {key}")
            return cached.value

        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            logger.debug(f"Lazy cache total miss: {key}")
            return None

        with self._locks.hold(key):
            # Another caller may have computed while we waited
            cached = self._read_cached(key, settings)
            if cached is not None:
                logger.debug(f"Lazy cache hit after wait: {key}")
                return cached.value

            logger.debug(f"Lazy cache miss, computing: {key}")
            value = entry.evaluate()
            if self._policy.should_store(settings, key, value):
                self._store.put(key, CachedValue(key=key, value=value))
            return value

    def invalidate(self, owner: Any, name: Optional[str] = None) -> int:
        """Drop cached values, keeping registrations.

        With ``name`` only that value is dropped; without it every value of
        the owner is dropped. Missing keys are ignored.

        Returns:
            Number of cached values removed
        """
        owner = OwnerRef.of(owner)
        if name is not None:
            key = LazyCacheKey(owner, name)
            with self._locks.hold(key):
                removed = 1 if self._store.delete(key) else 0
            logger.info(f"Invalidated lazy cache {key} (removed={removed})")
            return removed

        removed = self._store.delete_where(
            lambda k: isinstance(k, LazyCacheKey) and k.belongs_to(owner)
        )
        logger.info(f"Invalidated all lazy caches of {owner.display_name} (removed={removed})")
        return removed

    def is_registered(self, owner: Any, name: str) -> bool:
        with self._lock:
            return LazyCacheKey(OwnerRef.of(owner), name) in self._entries

    def is_cached(self, owner: Any, name: str) -> bool:
        """Check if a value is currently memoized for (owner, name)."""
        return self._store.exists(LazyCacheKey(OwnerRef.of(owner), name))

    def registered_names(self, owner: Any) -> List[str]:
        owner = OwnerRef.of(owner)
        with self._lock:
            return [key.name for key in self._entries if key.owner == owner]

    def unregister_all(self) -> None:
        """Remove every registration, accessor and cached value."""
        with self._lock:
            for key in list(self._entries):
                self._binder.remove_accessor(key.owner, key.name)
                self._store.delete(key)
            self._entries.clear()

    def _read_cached(self, key: LazyCacheKey, settings: CacheSettings) -> Optional[CachedValue]:
        if not self._store.exists(key):
            return None
        try:
            cached = self._store.get(key)
        except CacheKeyNotFoundError:
            # Invalidated between exists and get
            return None
        if self._policy.is_stale(settings, cached):
            logger.debug(f"Lazy cache value is stale: {key}")
            self._store.delete(key)
            return None
        return cached
