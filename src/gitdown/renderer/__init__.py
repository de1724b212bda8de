"""Rendering components for gitdown."""

from gitdown.renderer.document import build_document
from gitdown.renderer.engine import GitDown
from gitdown.renderer.shield import shield, unshield
from gitdown.renderer.styles import load_styles

__all__ = ["GitDown", "build_document", "load_styles", "shield", "unshield"]
