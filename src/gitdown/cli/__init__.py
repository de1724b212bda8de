"""Command line interface for gitdown."""

from gitdown.cli.main import app

__all__ = ["app"]
