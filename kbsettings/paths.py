"""
Home folder path helpers.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional


HOME_FOLDER_ENV_VAR = "KBSETTINGS_HOME"


def get_home_folder(override: Optional[str | Path] = None) -> Path:
    """
    Resolve the application home folder.

    Priority:
    1. Explicit override argument
    2. KBSETTINGS_HOME environment variable
    3. <home>/.kbsettings
    """
    candidate: str | Path | None = override
    if candidate is None:
        candidate = os.environ.get(HOME_FOLDER_ENV_VAR)
    if candidate is None:
        candidate = Path.home() / ".kbsettings"
    return Path(candidate).expanduser().resolve()


def get_default_config_path(home_folder: Optional[str | Path] = None) -> Path:
    """Return the default config file path inside the home folder."""
    return get_home_folder(home_folder) / "config.yaml"


def get_preferences_path(home_folder: Optional[str | Path] = None) -> Path:
    """Return the default preference file path inside the home folder."""
    return get_home_folder(home_folder) / "preferences.json"


def resolve_relative_path(path: str | Path, home_folder: Optional[str | Path] = None) -> Path:
    """
    Resolve a possibly-relative path against the home folder.
    """
    value = Path(path).expanduser()
    if value.is_absolute():
        return value.resolve()
    return (get_home_folder(home_folder) / value).resolve()
