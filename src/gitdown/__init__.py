"""gitdown: render Markdown through the GitHub API."""

__version__ = "0.1.0"
__author__ = "gitdown contributors"
__license__ = "MIT"

from gitdown.cache import CacheStore, DiskCacheStore
from gitdown.config.models import VALID_THEMES, RenderConfig
from gitdown.errors import (
    AssetNotFoundError,
    CacheNotConfiguredError,
    GitDownError,
    RemoteRenderError,
)
from gitdown.renderer import GitDown, load_styles, shield, unshield

__all__ = [
    "GitDown",
    "RenderConfig",
    "VALID_THEMES",
    "CacheStore",
    "DiskCacheStore",
    "GitDownError",
    "RemoteRenderError",
    "AssetNotFoundError",
    "CacheNotConfiguredError",
    "load_styles",
    "shield",
    "unshield",
    "__version__",
]
