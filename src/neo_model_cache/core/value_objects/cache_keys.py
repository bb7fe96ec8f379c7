"""Composite cache keys.

Strongly typed keys replace string prefixing of a shared store, so an owner
named ``a/b`` and a cache named ``c`` can never collide with owner ``a`` and
cache ``b/c``.
"""

from dataclasses import dataclass
from typing import Any

from .owner_ref import OwnerRef


@dataclass(frozen=True)
class LazyCacheKey:
    """Key of a lazy cache value: (owner, name)."""

    owner: OwnerRef
    name: str

    def belongs_to(self, owner: OwnerRef) -> bool:
        """Check if key is scoped to the given owner."""
        return self.owner == owner

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class ColumnCacheKey:
    """Key of a column cache table: (owner, column)."""

    owner: OwnerRef
    column: str

    def __str__(self) -> str:
        return f"{self.owner}#{self.column}"


def normalize_lookup_key(key: Any) -> str:
    """Normalize a column lookup key to its table representation.

    Keys are compared as strings: ``42`` and ``"42"`` address the same
    table entry, and the lookup function always receives the string form.
    Bytes are decoded as UTF-8 with ``surrogateescape`` so undecodable bytes
    still map to one reversible key. ``None`` is not a key; callers treat it
    as absent before normalizing.
    """
    if isinstance(key, (bytes, bytearray)):
        return bytes(key).decode("utf-8", errors="surrogateescape")
    return str(key)
