"""Cache exceptions."""

from .base import ModelCacheError, create_error_response
from .registration import (
    RegistrationError,
    MissingComputationError,
    MissingLookupError,
    DuplicateNameError,
    InvalidCacheOptionsError,
)
from .store import CacheKeyError, CacheKeyNotFoundError, InvalidOwnerError

__all__ = [
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
]
