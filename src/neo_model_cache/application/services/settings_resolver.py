"""Settings resolver.

ONLY settings merging - combines process-wide defaults with per-owner
overrides supplied at registration time.
"""

import logging
import threading
from typing import Any, Dict, Optional

from pydantic import ValidationError

from ...config.settings import ModelCacheDefaults, get_model_cache_defaults
from ...core.entities.cache_settings import CacheSettings
from ...core.exceptions.registration import InvalidCacheOptionsError
from ...core.value_objects.owner_ref import OwnerRef

logger = logging.getLogger(__name__)


class SettingsResolver:
    """Resolves effective CacheSettings per owner."""

    def __init__(self, defaults: Optional[ModelCacheDefaults] = None):
        self._defaults = defaults or get_model_cache_defaults()
        self._default_settings = self._defaults.to_cache_settings()
        self._effective: Dict[OwnerRef, CacheSettings] = {}
        self._lock = threading.Lock()

    @property
    def default_settings(self) -> CacheSettings:
        return self._default_settings

    def resolve(self, owner: Any, options: Optional[Dict[str, Any]] = None) -> CacheSettings:
        """Validate options against the owner's current settings without storing them.

        Raises:
            InvalidCacheOptionsError: if an option is unknown or has an invalid value
        """
        owner = OwnerRef.of(owner)
        options = dict(options or {})
        current = self.get_settings(owner)
        if not options:
            return current
        try:
            return current.merged_with(options)
        except ValidationError as e:
            reasons = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'options'}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidCacheOptionsError.from_validation(owner.display_name, options, reasons) from e

    def apply(self, owner: Any, settings: CacheSettings) -> None:
        """Store effective settings for the owner."""
        owner = OwnerRef.of(owner)
        with self._lock:
            previous = self._effective.get(owner)
            self._effective[owner] = settings
        if previous is not None and previous != settings:
            logger.info(f"Cache settings for {owner.display_name} changed to {settings.model_dump()}")

    def get_settings(self, owner: Any) -> CacheSettings:
        """Get effective settings: defaults merged with the owner's overrides."""
        owner = OwnerRef.of(owner)
        with self._lock:
            return self._effective.get(owner, self._default_settings)

    def forget(self, owner: Any) -> None:
        owner = OwnerRef.of(owner)
        with self._lock:
            self._effective.pop(owner, None)
