"""Unit tests for the diskcache-backed store."""

from pathlib import Path
from typing import Iterator

import pytest

from gitdown.cache import DiskCacheStore


@pytest.fixture
def store(tmp_path: Path) -> Iterator[DiskCacheStore]:
    """Create a store in a temporary directory."""
    with DiskCacheStore(tmp_path / "cache") as store:
        yield store


class TestDiskCacheStore:
    """Tests for DiskCacheStore."""

    def test_remember_forever_calls_producer_once(self, store: DiskCacheStore) -> None:
        """Test memoize-on-miss without a TTL."""
        calls = []

        def producer() -> str:
            calls.append(1)
            return "<p>cached</p>"

        assert store.remember_forever("key", producer) == "<p>cached</p>"
        assert store.remember_forever("key", producer) == "<p>cached</p>"
        assert len(calls) == 1

    def test_remember_with_ttl(self, store: DiskCacheStore) -> None:
        """Test memoize-on-miss with a TTL in minutes."""
        assert store.remember("key", 5, lambda: "first") == "first"
        assert store.remember("key", 5, lambda: "second") == "first"

    def test_falsy_values_are_cached(self, store: DiskCacheStore) -> None:
        """Test that an empty render result still counts as a hit."""
        store.remember_forever("empty", lambda: "")

        assert store.remember_forever("empty", lambda: "recomputed") == ""

    def test_persists_across_instances(self, tmp_path: Path) -> None:
        """Test that values survive reopening the directory."""
        with DiskCacheStore(tmp_path / "cache") as first:
            first.remember_forever("key", lambda: "stored")

        with DiskCacheStore(tmp_path / "cache") as second:
            assert second.remember_forever("key", lambda: "other") == "stored"

    def test_producer_errors_not_stored(self, store: DiskCacheStore) -> None:
        """Test that a failing producer leaves the key empty."""

        def producer() -> str:
            raise RuntimeError("render failed")

        with pytest.raises(RuntimeError):
            store.remember_forever("key", producer)

        assert store.remember_forever("key", lambda: "ok") == "ok"
