"""Get mongowrap home directory path or path under it."""

import os
from pathlib import Path

from ..constants import MONGOWRAP_HOME_ENV, MONGOWRAP_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get mongowrap home directory path or path under it.

    Checks MONGOWRAP_HOME environment variable first, defaults to ~/.mongowrap if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to the home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.mongowrap")
        >>> get_home_dir("config.json")
        Path("/Users/user/.mongowrap/config.json")
    """
    home_env = os.environ.get(MONGOWRAP_HOME_ENV)
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        home = Path.home() / MONGOWRAP_HOME_EXT

    return home / Path(*parts) if parts else home
