"""Theme stylesheet loading."""

import logging
from pathlib import Path

from gitdown.config.settings import ASSETS_DIR
from gitdown.errors import AssetNotFoundError
from gitdown.security.path_validator import SecurityError, validate_path

logger = logging.getLogger(__name__)


def stylesheet_name(theme: str) -> str:
    """Return the stylesheet file name for a theme."""
    return f"styles-{theme}.css"


def load_styles(theme: str, assets_dir: Path = ASSETS_DIR) -> str:
    """
    Read the pre-built stylesheet for a theme.

    Args:
        theme: Theme name, e.g. ``light`` or ``dark``
        assets_dir: Directory holding ``styles-<theme>.css`` files

    Returns:
        Stylesheet contents

    Raises:
        AssetNotFoundError: If the stylesheet does not exist
    """
    try:
        path = validate_path(Path(stylesheet_name(theme)), assets_dir)
    except (SecurityError, FileNotFoundError) as e:
        raise AssetNotFoundError(theme) from e

    logger.debug(f"Loading stylesheet: {path}")
    return path.read_text(encoding="utf-8")
