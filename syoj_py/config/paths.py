"""XDG base directory lookup for configuration files."""

import os
from pathlib import Path
from typing import List, Optional


APP_NAME = "syojctl"
CREDENTIALS_FILE = f"{APP_NAME}/credentials.json"


def config_home() -> Path:
    """Return $XDG_CONFIG_HOME, or ~/.config when unset or relative."""
    value = os.environ.get("XDG_CONFIG_HOME", "")
    if value and os.path.isabs(value):
        return Path(value)
    return Path.home() / ".config"


def config_dirs() -> List[Path]:
    """Return the entries of $XDG_CONFIG_DIRS, defaulting to /etc/xdg."""
    value = os.environ.get("XDG_CONFIG_DIRS", "")
    dirs = [Path(d) for d in value.split(os.pathsep) if d and os.path.isabs(d)]
    return dirs or [Path("/etc/xdg")]


def search_config_file(
    relative: str,
    home: Optional[Path] = None,
    dirs: Optional[List[Path]] = None,
) -> Optional[Path]:
    """
    Look for `relative` in the config home, then in each config dir.
    Returns the first existing file, or None.
    """
    candidates = [home or config_home()] + list(dirs if dirs is not None else config_dirs())
    for base in candidates:
        path = base / relative
        if path.is_file():
            return path
    return None
