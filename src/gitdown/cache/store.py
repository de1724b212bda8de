"""Cache stores used to memoize rendered Markdown."""

import logging
from pathlib import Path
from typing import Any, Callable, Protocol

import diskcache

logger = logging.getLogger(__name__)

_MISSING = object()


class CacheStore(Protocol):
    """Key/value store with memoize-on-miss semantics."""

    def remember_forever(self, key: str, producer: Callable[[], Any]) -> Any:
        """Return the value under ``key``, computing and storing it on a miss."""
        ...

    def remember(self, key: str, minutes: float, producer: Callable[[], Any]) -> Any:
        """Like :meth:`remember_forever`, but the stored value expires."""
        ...


class DiskCacheStore:
    """CacheStore backed by a :class:`diskcache.Cache` directory."""

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)
        self._cache = diskcache.Cache(str(self.directory))

    def remember_forever(self, key: str, producer: Callable[[], Any]) -> Any:
        return self._remember(key, None, producer)

    def remember(self, key: str, minutes: float, producer: Callable[[], Any]) -> Any:
        return self._remember(key, minutes * 60, producer)

    def _remember(
        self, key: str, expire: float | None, producer: Callable[[], Any]
    ) -> Any:
        value = self._cache.get(key, default=_MISSING)
        if value is not _MISSING:
            logger.debug(f"Cache hit: {key}")
            return value

        logger.debug(f"Cache miss: {key}")
        value = producer()
        self._cache.set(key, value, expire=expire)
        return value

    def close(self) -> None:
        """Close the underlying cache."""
        self._cache.close()

    def __enter__(self) -> "DiskCacheStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
