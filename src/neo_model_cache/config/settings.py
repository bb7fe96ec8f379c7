"""Process-wide cache defaults.

Read from environment variables prefixed with ``NEO_MODEL_CACHE_``:

    NEO_MODEL_CACHE_TTL_SECONDS=3600
    NEO_MODEL_CACHE_CACHE_METHOD=local
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.entities.cache_settings import CacheSettings
from ..core.value_objects.cache_method import CacheMethod


class ModelCacheDefaults(BaseSettings):
    """Default settings applied to every owner before its own overrides."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_MODEL_CACHE_",
        case_sensitive=False,
        extra="ignore"
    )

    ttl_seconds: Optional[int] = Field(default=None, ge=1, description="Default TTL, unset means never expire")
    cache_method: CacheMethod = Field(default=CacheMethod.LOCAL, description="Default cache backing")

    def to_cache_settings(self) -> CacheSettings:
        """Convert to the settings entity used by registries."""
        return CacheSettings(ttl=self.ttl_seconds, cache_method=self.cache_method)


@lru_cache()
def get_model_cache_defaults() -> ModelCacheDefaults:
    """Get cached defaults loaded from the environment."""
    return ModelCacheDefaults()
