"""Cache protocols."""

from .key_value_store import KeyValueStore
from .cache_policy import CachePolicy
from .record_source import RecordSource

__all__ = [
    "KeyValueStore",
    "CachePolicy",
    "RecordSource",
]
