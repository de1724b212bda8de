"""Application settings and configuration."""

import os
from pathlib import Path

# Remote renderer
API_URL = "https://api.github.com/markdown"
USER_AGENT = "GitDown Plugin"

# Themes
DEFAULT_THEME = "light"
ASSETS_DIR = Path(__file__).parent.parent / "dist"
TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

# CLI defaults
DEFAULT_LOG_LEVEL = os.getenv("GITDOWN_LOG_LEVEL", "INFO")
DEFAULT_CACHE_DIR = Path(
    os.getenv("GITDOWN_CACHE_DIR", str(Path.home() / ".cache" / "gitdown"))
)

__all__ = [
    "API_URL",
    "USER_AGENT",
    "DEFAULT_THEME",
    "ASSETS_DIR",
    "TEMPLATES_DIR",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_CACHE_DIR",
]
