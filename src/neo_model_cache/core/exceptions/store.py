"""Key and store exceptions."""

from typing import Any

from .base import ModelCacheError


class CacheKeyError(ModelCacheError):
    """Base class for cache key errors."""
    pass


class CacheKeyNotFoundError(CacheKeyError, KeyError):
    """Raised by KeyValueStore.get when the key holds no value."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(
            f"No cached value for key {key}",
            error_code="CACHE_KEY_NOT_FOUND",
            details={"key": str(key)},
        )

    def __str__(self) -> str:
        return self.message


class InvalidOwnerError(CacheKeyError):
    """Raised when an owner cannot be turned into an owner reference."""

    def __init__(self, owner: Any, reason: str):
        self.owner = owner
        super().__init__(
            f"Invalid cache owner {owner!r}: {reason}",
            error_code="INVALID_OWNER",
            details={"owner_type": type(owner).__name__},
        )
