"""Cache core domain layer.

Value objects, entities, exceptions and protocols. No orchestration logic.
"""

from .entities import *
from .value_objects import *
from .exceptions import *
from .protocols import *

__all__ = [
    # Entities
    "LazyCacheEntry",
    "CachedValue",
    "ColumnCacheEntry",
    "ColumnCacheTable",
    "CacheSettings",

    # Value Objects
    "OwnerRef",
    "LazyCacheKey",
    "ColumnCacheKey",
    "normalize_lookup_key",
    "CacheMethod",

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

    # Protocols
    "KeyValueStore",
    "CachePolicy",
    "RecordSource",
]
