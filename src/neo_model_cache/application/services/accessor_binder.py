"""Accessor binder.

ONLY accessor installation - keeps a dispatch table of cache accessors per
owner and exposes them on class owners through a descriptor, so
``User.featured()`` and ``User().featured()`` resolve by ordinary
attribute lookup.
"""

import keyword
import logging
import threading
import types
from typing import Any, Callable, Dict, List, Optional

from ...core.exceptions.registration import DuplicateNameError, RegistrationError
from ...core.value_objects.owner_ref import OwnerRef

logger = logging.getLogger(__name__)


class CacheAccessor:
    """Descriptor returning the same accessor callable from class and instances."""

    def __init__(self, owner: OwnerRef, name: str, thunk: Callable[..., Any]):
        self.owner = owner
        self.name = name
        self.thunk = thunk

    def __get__(self, instance, objtype=None) -> Callable[..., Any]:
        return self.thunk

    def __repr__(self) -> str:
        return f"<CacheAccessor {self.owner.display_name}.{self.name}>"


class AccessorBinder:
    """Installs cache accessors on owners."""

    def __init__(self):
        self._tables: Dict[OwnerRef, Dict[str, Callable[..., Any]]] = {}
        self._lock = threading.RLock()

    def has_accessor(self, owner: Any, name: str) -> bool:
        """Check if ``name`` already resolves on the owner, inherited members included."""
        owner = OwnerRef.of(owner)
        with self._lock:
            if name in self._tables.get(owner, {}):
                return True
        if owner.is_type:
            return hasattr(owner.owner_type, name)
        return False

    def validate_name(self, owner: Any, name: str, hint: Optional[str] = None) -> None:
        """Raise unless ``name`` can be installed as a new accessor on the owner."""
        owner = OwnerRef.of(owner)
        if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
            raise RegistrationError(
                f"{name!r} is not a valid accessor name for {owner.display_name}",
                error_code="INVALID_ACCESSOR_NAME",
                details={"owner": owner.name, "name": repr(name)},
            )
        if self.has_accessor(owner, name):
            raise DuplicateNameError.for_accessor(owner.display_name, name, hint)

    def install_accessor(self, owner: Any, name: str, thunk: Callable[..., Any], doc: Optional[str] = None) -> Callable[..., Any]:
        """Install ``thunk`` as a public accessor called ``name`` on the owner.

        Raises:
            DuplicateNameError: if the name already resolves on the owner
        """
        owner = OwnerRef.of(owner)
        with self._lock:
            self.validate_name(owner, name)

            if isinstance(thunk, types.FunctionType):
                thunk.__name__ = name
                thunk.__qualname__ = f"{owner.display_name}.{name}"
                if doc:
                    thunk.__doc__ = doc

            self._tables.setdefault(owner, {})[name] = thunk
            if owner.is_type:
                setattr(owner.owner_type, name, CacheAccessor(owner, name, thunk))

        logger.debug(f"Installed accessor {owner.display_name}.{name}")
        return thunk

    def remove_accessor(self, owner: Any, name: str) -> bool:
        """Remove an installed accessor. Returns True if one was removed."""
        owner = OwnerRef.of(owner)
        with self._lock:
            table = self._tables.get(owner)
            if not table or name not in table:
                return False
            del table[name]
            if not table:
                del self._tables[owner]
            if owner.is_type and isinstance(owner.owner_type.__dict__.get(name), CacheAccessor):
                delattr(owner.owner_type, name)
        logger.debug(f"Removed accessor {owner.display_name}.{name}")
        return True

    def resolve(self, owner: Any, name: str) -> Callable[..., Any]:
        """Get the accessor installed under ``name``.

        Raises:
            AttributeError: if no accessor is installed under that name
        """
        owner = OwnerRef.of(owner)
        with self._lock:
            thunk = self._tables.get(owner, {}).get(name)
        if thunk is None:
            raise AttributeError(f"{owner.display_name} has no cache accessor {name!r}")
        return thunk

    def call(self, owner: Any, name: str, *args: Any) -> Any:
        """Invoke an accessor through the dispatch table."""
        return self.resolve(owner, name)(*args)

    def accessor_names(self, owner: Any) -> List[str]:
        owner = OwnerRef.of(owner)
        with self._lock:
            return list(self._tables.get(owner, {}).keys())

    def owners(self) -> List[OwnerRef]:
        with self._lock:
            return list(self._tables.keys())
