"""Concurrency helpers."""

from .keyed_locks import KeyedLocks

__all__ = ["KeyedLocks"]
