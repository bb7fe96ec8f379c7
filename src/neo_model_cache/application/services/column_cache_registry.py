"""Column cache registry.

ONLY column cache orchestration - memoizes record lookups per owner and
column. Lookups that find nothing are never cached, so a record created
later is picked up by the next call with the same key.
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional, Tuple

from ...core.entities.column_cache_entry import ColumnCacheEntry, ColumnCacheTable
from ...core.exceptions.registration import MissingLookupError
from ...core.value_objects.cache_keys import ColumnCacheKey, normalize_lookup_key
from ...core.value_objects.owner_ref import OwnerRef
from ...infrastructure.concurrency.keyed_locks import KeyedLocks
from .accessor_binder import AccessorBinder
from .settings_resolver import SettingsResolver

logger = logging.getLogger(__name__)


class ColumnCacheRegistry:
    """Per-owner, per-column tables of resolved records."""

    def __init__(
        self,
        binder: AccessorBinder,
        settings: SettingsResolver,
        locks: Optional[KeyedLocks] = None
    ):
        self._binder = binder
        self._settings = settings
        self._locks = locks or KeyedLocks()
        self._entries: Dict[Tuple[ColumnCacheKey, str], ColumnCacheEntry] = {}
        self._tables: Dict[ColumnCacheKey, ColumnCacheTable] = {}
        self._lock = threading.RLock()

    def register(
        self,
        owner: Any,
        column: str,
        lookup: Optional[Callable[[str], Optional[Any]]],
        accessor_name: Optional[str] = None,
        options: Optional[Dict[str, Any]] = None
    ) -> None:
        """Register a column cache and install ``owner.<accessor_name>(key)``.

        Args:
            owner: Owning class or owner name
            column: Column the lookup matches on
            lookup: Function returning the record for a key, or None
            accessor_name: Accessor to install (default: the column name)
            options: Cache setting overrides for the owner

        Raises:
            MissingLookupError: if lookup is missing or not callable
            DuplicateNameError: if the accessor name already resolves on the owner
            InvalidCacheOptionsError: if options fail validation
        """
        owner = OwnerRef.of(owner)
        column = str(column)
        accessor_name = accessor_name or column
        if lookup is None or not callable(lookup):
            raise MissingLookupError.for_column(owner.display_name, column)

        with self._lock:
            self._binder.validate_name(
                owner, accessor_name,
                hint='define another name using the "as" option',
            )
            settings = self._settings.resolve(owner, options)

            key = ColumnCacheKey(owner, column)

            def accessor(value):
                return self.fetch(owner, column, value, accessor_name=accessor_name)

            self._binder.install_accessor(
                owner, accessor_name, accessor,
                doc=f"Find a cached {owner.display_name} record by {column!r}."
            )
            self._entries[(key, accessor_name)] = ColumnCacheEntry(
                key=key, accessor_name=accessor_name, lookup=lookup
            )
            self._tables.setdefault(key, ColumnCacheTable(key=key))
            self._settings.apply(owner, settings)

        logger.info(f"Registered column cache {owner.display_name}.{accessor_name} on column {column!r}")

    def fetch(
        self,
        owner: Any,
        column: str,
        key: Any,
        accessor_name: Optional[str] = None
    ) -> Optional[Any]:
        """Get the record for ``key``, looking it up on first use.

        Returns None when the column has no registered cache, the key is None
        or the lookup finds nothing; none of these cases is stored and a None
        key never reaches the lookup. Exceptions raised by the
        lookup propagate and nothing is stored.
        """
        owner = OwnerRef.of(owner)
        table_key = ColumnCacheKey(owner, str(column))

        with self._lock:
            table = self._tables.get(table_key)
            entry = self._resolve_entry(table_key, accessor_name)
        if table is None or entry is None:
            logger.debug(f"Column cache not registered: {table_key}")
            return None

        if key is None:
            logger.debug(f"Column cache fetch without key: {table_key}")
            return None

        lookup_key = normalize_lookup_key(key)
        if table.contains(lookup_key):
            logger.debug(f"Column cache hit: {table_key}[{lookup_key!r}]")
            return table.get(lookup_key)

        with self._locks.hold((table_key, lookup_key)):
            if table.contains(lookup_key):
                return table.get(lookup_key)

            record = entry.lookup(lookup_key)
            if record is None:
                logger.debug(f"Column cache lookup found nothing, not cached: {table_key}[{lookup_key!r}]")
                return None

            table.store(lookup_key, record)
            logger.debug(f"Column cache stored: {table_key}[{lookup_key!r}]")
            return record

    def is_registered(self, owner: Any, column: str) -> bool:
        with self._lock:
            return ColumnCacheKey(OwnerRef.of(owner), str(column)) in self._tables

    def table_size(self, owner: Any, column: str) -> int:
        """Number of records cached for (owner, column); 0 if not registered."""
        with self._lock:
            table = self._tables.get(ColumnCacheKey(OwnerRef.of(owner), str(column)))
        return len(table) if table is not None else 0

    def cached_keys(self, owner: Any, column: str) -> List[str]:
        with self._lock:
            table = self._tables.get(ColumnCacheKey(OwnerRef.of(owner), str(column)))
        return table.keys() if table is not None else []

    def accessor_names(self, owner: Any, column: str) -> List[str]:
        table_key = ColumnCacheKey(OwnerRef.of(owner), str(column))
        with self._lock:
            return [name for (key, name) in self._entries if key == table_key]

    def unregister_all(self) -> None:
        """Remove every registration, accessor and table."""
        with self._lock:
            for (key, accessor_name) in list(self._entries):
                self._binder.remove_accessor(key.owner, accessor_name)
            self._entries.clear()
            self._tables.clear()

    def _resolve_entry(self, table_key: ColumnCacheKey, accessor_name: Optional[str]) -> Optional[ColumnCacheEntry]:
        if accessor_name is not None:
            return self._entries.get((table_key, accessor_name))
        # First registered accessor of the column
        for (key, _), entry in self._entries.items():
            if key == table_key:
                return entry
        return None
