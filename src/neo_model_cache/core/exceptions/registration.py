"""Registration-time exceptions.

Raised synchronously by the register operations before any accessor is
installed or any registry state is written.
"""

from typing import Any, Optional

from .base import ModelCacheError


class RegistrationError(ModelCacheError):
    """Base class for cache registration errors."""
    pass


class MissingComputationError(RegistrationError):
    """Raised when a lazy cache is registered without a callable computation."""

    @classmethod
    def for_lazy_cache(cls, owner: str, name: str, compute: Optional[Any] = None) -> "MissingComputationError":
        """Create exception for a lazy cache registered without a computation."""
        return cls(
            f"A computation is required to register lazy cache {owner}.{name}",
            error_code="MISSING_COMPUTATION",
            details={
                "owner": owner,
                "name": name,
                "received": type(compute).__name__,
            },
        )


class MissingLookupError(RegistrationError):
    """Raised when a column cache has no lookup function and no record source."""

    @classmethod
    def for_column(cls, owner: str, column: str) -> "MissingLookupError":
        """Create exception for a column cache without any lookup."""
        return cls(
            f"A lookup is required to cache {owner} by column {column!r}; "
            f"pass one or define find_first_by on the model",
            error_code="MISSING_LOOKUP",
            details={"owner": owner, "column": column},
        )


class DuplicateNameError(RegistrationError):
    """Raised when the requested accessor name already resolves on the owner."""

    @classmethod
    def for_accessor(cls, owner: str, name: str, hint: Optional[str] = None) -> "DuplicateNameError":
        """Create exception for an accessor name collision."""
        message = f"The method {owner}.{name} is already defined, use another name"
        if hint:
            message = f"{message} ({hint})"
        return cls(
            message,
            error_code="DUPLICATE_ACCESSOR_NAME",
            details={"owner": owner, "name": name},
        )


class InvalidCacheOptionsError(RegistrationError):
    """Raised when per-registration cache options fail validation."""

    @classmethod
    def from_validation(cls, owner: str, options: dict, reason: str) -> "InvalidCacheOptionsError":
        """Create exception wrapping an options validation failure."""
        return cls(
            f"Invalid cache options for {owner}: {reason}",
            error_code="INVALID_CACHE_OPTIONS",
            details={"owner": owner, "options": sorted(options)},
        )
