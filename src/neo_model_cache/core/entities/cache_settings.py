"""Cache settings entity.

Settings are merged from process-wide defaults and per-owner overrides.
They are exposed for inspection and for CachePolicy implementations; the
default policy does not act on them.
"""

from datetime import timedelta
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..value_objects.cache_method import CacheMethod


class CacheSettings(BaseModel):
    """Effective cache settings for an owner."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    ttl: Optional[timedelta] = Field(default=None, description="Time to live, None means never expire")
    cache_method: CacheMethod = Field(default=CacheMethod.LOCAL, description="Cache backing")

    @field_validator("ttl", mode="before")
    @classmethod
    def coerce_ttl(cls, v):
        """Accept seconds as int/float; treat falsy values as no TTL."""
        if v is None or v is False or v == 0:
            return None
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            if v < 0:
                raise ValueError("ttl must not be negative")
            return timedelta(seconds=v)
        return v

    @field_validator("ttl")
    @classmethod
    def validate_ttl(cls, v):
        if v is not None and v.total_seconds() <= 0:
            raise ValueError("ttl must be positive")
        return v

    @field_validator("cache_method", mode="before")
    @classmethod
    def coerce_cache_method(cls, v):
        """Accept ``False`` as an alias for disabled."""
        if v is False:
            return CacheMethod.DISABLED
        return v

    def merged_with(self, overrides: Dict[str, Any]) -> "CacheSettings":
        """Return new settings with overrides applied and validated."""
        data = self.model_dump()
        data.update(overrides)
        return CacheSettings(**data)

    @property
    def ttl_seconds(self) -> Optional[float]:
        return self.ttl.total_seconds() if self.ttl is not None else None
