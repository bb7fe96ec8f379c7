"""Unit tests for the in-memory key-value store."""

import threading

import pytest

from neo_model_cache import (
    CacheKeyNotFoundError,
    KeyValueStore,
    MemoryKeyValueStore,
    create_memory_key_value_store,
)


@pytest.fixture
def store():
    return create_memory_key_value_store()


class TestMemoryKeyValueStore:
    """Test store contract."""

    def test_implements_protocol(self, store):
        assert isinstance(store, KeyValueStore)
        assert isinstance(store, MemoryKeyValueStore)

    def test_put_get_exists_delete(self, store):
        assert not store.exists("k")

        store.put("k", "v")
        assert store.exists("k")
        assert store.get("k") == "v"

        assert store.delete("k") is True
        assert not store.exists("k")

    def test_none_value_exists(self, store):
        store.put("k", None)

        assert store.exists("k")
        assert store.get("k") is None

    def test_get_missing_raises(self, store):
        with pytest.raises(CacheKeyNotFoundError) as exc_info:
            store.get("missing")

        assert exc_info.value.error_code == "CACHE_KEY_NOT_FOUND"
        assert isinstance(exc_info.value, KeyError)

    def test_delete_missing_is_noop(self, store):
        assert store.delete("missing") is False

    def test_fetch_or_compute(self, store, mocker):
        compute = mocker.Mock(return_value="computed")

        assert store.fetch_or_compute("k", compute) == "computed"
        assert store.fetch_or_compute("k", compute) == "computed"
        assert compute.call_count == 1

    def test_compute_does_not_block_other_keys(self, store):
        """A slow computation leaves the rest of the store usable."""
        started = threading.Event()
        release = threading.Event()
        results = []

        def compute():
            started.set()
            release.wait(timeout=5)
            return "slow"

        worker = threading.Thread(target=lambda: results.append(store.fetch_or_compute("a", compute)))
        worker.start()
        try:
            assert started.wait(timeout=5)

            store.put("b", 1)
            assert store.get("b") == 1
            assert store.fetch_or_compute("c", lambda: 3) == 3
            assert not store.exists("a")
            assert results == []
        finally:
            release.set()
            worker.join(timeout=5)

        assert results == ["slow"]
        assert store.get("a") == "slow"

    def test_concurrent_fetch_or_compute_of_one_key_runs_once(self, store, mocker):
        compute = mocker.Mock(return_value="v")
        threads = [threading.Thread(target=store.fetch_or_compute, args=("k", compute)) for _ in range(8)]

        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=5)

        assert compute.call_count == 1
        assert store.get("k") == "v"

    def test_delete_where(self, store):
        store.put(("user", "a"), 1)
        store.put(("user", "b"), 2)
        store.put(("team", "a"), 3)

        removed = store.delete_where(lambda key: key[0] == "user")

        assert removed == 2
        assert store.keys() == [("team", "a")]

    def test_clear(self, store):
        store.put("a", 1)
        store.put("b", 2)

        store.clear()

        assert len(store) == 0

    def test_stats(self, store):
        store.put("k", 1)
        store.get("k")
        with pytest.raises(CacheKeyNotFoundError):
            store.get("missing")

        stats = store.get_stats()

        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["puts"] == 1
        assert stats["total_keys"] == 1
        assert stats["hit_rate_percent"] == 50.0
