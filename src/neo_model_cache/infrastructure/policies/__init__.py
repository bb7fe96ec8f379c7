"""Cache policy implementations."""

from .noop_cache_policy import NoOpCachePolicy

__all__ = ["NoOpCachePolicy"]
