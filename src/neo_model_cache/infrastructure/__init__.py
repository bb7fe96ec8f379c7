"""Cache infrastructure layer.

Concrete store, lock and policy implementations behind the core protocols.
"""

from .stores import MemoryKeyValueStore, create_memory_key_value_store
from .concurrency import KeyedLocks
from .policies import NoOpCachePolicy

__all__ = [
    "MemoryKeyValueStore",
    "create_memory_key_value_store",
    "KeyedLocks",
    "NoOpCachePolicy",
]
