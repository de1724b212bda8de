"""Configuration for gitdown."""

from gitdown.config.models import VALID_THEMES, RenderConfig

__all__ = ["RenderConfig", "VALID_THEMES"]
