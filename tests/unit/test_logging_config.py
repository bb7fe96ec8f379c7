"""Unit tests for logging configuration."""

import logging

import pytest

from neo_model_cache.config.logging_config import (
    LoggingConfig,
    get_log_level_from_verbosity,
    setup_logging,
)


@pytest.fixture
def restore_package_logger():
    """Undo dictConfig changes to the package logger."""
    logger = logging.getLogger("neo_model_cache")
    saved = (logger.level, logger.propagate, list(logger.handlers))
    yield logger
    logger.setLevel(saved[0])
    logger.propagate = saved[1]
    logger.handlers[:] = saved[2]


class TestLoggingConfig:
    """Test environment driven logging setup."""

    def test_verbosity_mapping(self):
        assert get_log_level_from_verbosity("quiet") == "ERROR"
        assert get_log_level_from_verbosity("VERBOSE") == "INFO"
        assert get_log_level_from_verbosity("unknown") == "WARNING"

    def test_build_config_from_environment(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_VERBOSITY", "DEBUG")
        monkeypatch.setenv("LOG_FORMAT", "json")

        config = LoggingConfig.build_config()

        assert config["loggers"]["neo_model_cache"]["level"] == "DEBUG"
        assert config["formatters"]["default"]["format"].startswith('{"time"')

    def test_log_level_overrides_verbosity(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "error")
        monkeypatch.setenv("LOG_VERBOSITY", "DEBUG")

        config = LoggingConfig.build_config()

        assert config["handlers"]["console"]["level"] == "ERROR"

    def test_setup_logging(self, monkeypatch, restore_package_logger):
        monkeypatch.setenv("LOG_LEVEL", "INFO")

        setup_logging()

        assert restore_package_logger.level == logging.INFO

    def test_registration_is_logged(self, model_cache, user_model, caplog):
        with caplog.at_level(logging.INFO, logger="neo_model_cache"):
            model_cache.register_lazy_cache(user_model, "featured", lambda: 1)

        assert "Registered lazy cache User.featured" in caplog.text
