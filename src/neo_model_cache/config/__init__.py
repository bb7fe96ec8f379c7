"""Configuration for neo-model-cache."""

from .settings import ModelCacheDefaults, get_model_cache_defaults
from .logging_config import (
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
    setup_logging,
    get_logger,
)

__all__ = [
    "ModelCacheDefaults",
    "get_model_cache_defaults",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
    "setup_logging",
    "get_logger",
]
