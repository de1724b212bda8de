"""Result caching for gitdown.

:class:`CacheStore` is the contract :meth:`gitdown.GitDown.render_cached`
relies on; :class:`DiskCacheStore` implements it on top of :mod:`diskcache`.
"""

from gitdown.cache.store import CacheStore, DiskCacheStore

__all__ = ["CacheStore", "DiskCacheStore"]
