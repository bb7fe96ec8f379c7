"""Key-value store implementations."""

from .memory_key_value_store import MemoryKeyValueStore, create_memory_key_value_store

__all__ = [
    "MemoryKeyValueStore",
    "create_memory_key_value_store",
]
