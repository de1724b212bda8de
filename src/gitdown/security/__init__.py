"""Security helpers for gitdown."""

from gitdown.security.path_validator import SecurityError, validate_path

__all__ = ["SecurityError", "validate_path"]
