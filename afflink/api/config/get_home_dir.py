"""Get afflink home directory path or path under it."""

import os
from pathlib import Path


def get_home_dir(*parts: str) -> Path:
    """Get afflink home directory path or path under it.

    Checks the AFFLINK_HOME environment variable first, defaults to ~/.afflink.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.afflink")
        >>> get_home_dir("config.json")
        Path("/Users/user/.afflink/config.json")
    """
    home_env = os.environ.get("AFFLINK_HOME")
    home = Path(home_env).expanduser().resolve() if home_env else Path.home() / ".afflink"
    return home / Path(*parts) if parts else home
