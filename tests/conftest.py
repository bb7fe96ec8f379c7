"""Pytest configuration and fixtures for neo-model-cache tests."""

import pytest

from neo_model_cache import (
    ModelCache,
    ModelCacheDefaults,
    reset_default_model_cache,
)


class Record:
    """Minimal record returned by fake data sources."""

    def __init__(self, **fields):
        self.__dict__.update(fields)

    def __repr__(self):
        return f"Record({self.__dict__!r})"


@pytest.fixture
def model_cache():
    """Isolated ModelCache with default settings."""
    cache = ModelCache(defaults=ModelCacheDefaults(ttl_seconds=None, cache_method="local"))
    yield cache
    cache.reset()


@pytest.fixture(autouse=True)
def clean_default_model_cache():
    """Discard the process-wide cache after each test."""
    yield
    reset_default_model_cache()


@pytest.fixture
def user_model():
    """Fresh model class per test so accessors never leak between tests."""

    class User:
        pass

    return User


@pytest.fixture
def fake_db(mocker):
    """Fake data source with a mutable set of users keyed by email."""
    db = mocker.MagicMock()
    db.rows = {}
    db.featured = Record(id=1, email="featured@x.com")
    db.find_featured.side_effect = lambda: db.featured
    db.find_by_email.side_effect = lambda email: db.rows.get(email)
    return db


@pytest.fixture
def make_record():
    """Factory for records."""
    return Record
