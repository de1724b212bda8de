"""Path validation for packaged assets."""

from pathlib import Path


class SecurityError(Exception):
    """Raised when a path escapes its root directory."""

    pass


def validate_path(requested_path: Path, root_path: Path) -> Path:
    """
    Validate that requested path is within root directory.

    Args:
        requested_path: Path relative to the root
        root_path: The directory assets are read from

    Returns:
        The resolved absolute path if valid

    Raises:
        SecurityError: If path is outside root or invalid
        FileNotFoundError: If the path does not exist
    """
    try:
        abs_root = root_path.resolve(strict=False)
        abs_requested = (root_path / requested_path).resolve(strict=False)

        if not abs_requested.is_relative_to(abs_root):
            raise SecurityError(f"Access denied: {requested_path} is outside {root_path}")

        if not abs_requested.is_file():
            raise FileNotFoundError(f"Path not found: {requested_path}")

        return abs_requested

    except ValueError as e:
        raise SecurityError(f"Invalid path: {requested_path}") from e
