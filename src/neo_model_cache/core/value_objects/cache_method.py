"""Cache method value object."""

from enum import Enum


class CacheMethod(str, Enum):
    """Where cached values are meant to live.

    Only LOCAL is backed by an implementation; the other values are accepted
    so configuration written for other backends stays valid.
    """
    LOCAL = "local"
    MEMCACHED = "memcached"
    DISABLED = "disabled"
