"""
Configuration models for the keyboard settings app.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Optional

from kbsettings.paths import get_home_folder, get_preferences_path, resolve_relative_path

DEFAULT_FEEDBACK_URL = "https://github.com/florisboard/florisboard/discussions/1235"
DEFAULT_ENGINE_ID = "kbsettings"
DEFAULT_POLL_INTERVAL_S = 2.0

BackendName = Literal["static", "ibus"]
SUPPORTED_BACKENDS: tuple[str, ...] = ("static", "ibus")


class ConfigError(ValueError):
    """Raised when configuration values are invalid."""


@dataclass
class PreferencesConfig:
    """Where preference flags are persisted."""

    path: Optional[Path] = None
    """Preference JSON file. Relative paths resolve against the home folder."""


@dataclass
class PlatformConfig:
    """Input-method status source."""

    backend: str = "static"
    """Backend name: 'static' or 'ibus'."""

    engine_id: str = DEFAULT_ENGINE_ID
    """IBus engine name identifying this keyboard."""

    enabled: bool = True
    """Static backend: whether the keyboard reports as enabled."""

    selected: bool = True
    """Static backend: whether the keyboard reports as the active input method."""

    foreground_only: bool = True
    """Freeze status sampling while the app is in the background."""

    poll_interval: float = DEFAULT_POLL_INTERVAL_S
    """Seconds between status samples while the home screen is shown."""

    def __post_init__(self) -> None:
        env_backend = os.environ.get("KBSETTINGS_BACKEND")
        if env_backend:
            self.backend = env_backend
        env_engine = os.environ.get("KBSETTINGS_ENGINE_ID")
        if env_engine:
            self.engine_id = env_engine
        self.backend = str(self.backend or "").strip().lower()
        self.engine_id = str(self.engine_id or "").strip()

    def validate(self) -> None:
        if self.backend not in SUPPORTED_BACKENDS:
            raise ConfigError(
                f"platform.backend must be one of {', '.join(SUPPORTED_BACKENDS)}, got '{self.backend}'"
            )
        if self.backend == "ibus" and not self.engine_id:
            raise ConfigError("platform.engine_id is required for the ibus backend")
        if not math.isfinite(self.poll_interval) or self.poll_interval <= 0:
            raise ConfigError(
                f"platform.poll_interval must be a positive number, got {self.poll_interval}"
            )


@dataclass
class HomeConfig:
    """Home screen content."""

    feedback_url: str = DEFAULT_FEEDBACK_URL
    """URL opened by the info panel feedback button."""

    strings_file: Optional[Path] = None
    """Optional YAML mapping of string resource ids to text."""

    def validate(self) -> None:
        if not self.feedback_url.strip():
            raise ConfigError("home.feedback_url must not be empty")


@dataclass
class AppConfig:
    """
    Top-level configuration.
    """

    home_folder: Optional[Path] = None
    """Application home folder. Defaults to KBSETTINGS_HOME or ~/.kbsettings."""

    preferences: PreferencesConfig = field(default_factory=PreferencesConfig)
    platform: PlatformConfig = field(default_factory=PlatformConfig)
    home: HomeConfig = field(default_factory=HomeConfig)

    config_path: Optional[Path] = None
    """File the config was loaded from, if any."""

    def __post_init__(self) -> None:
        self.home_folder = get_home_folder(self.home_folder)
        if self.preferences.path is None:
            self.preferences.path = get_preferences_path(self.home_folder)
        else:
            self.preferences.path = resolve_relative_path(self.preferences.path, self.home_folder)
        if self.home.strings_file is not None:
            self.home.strings_file = resolve_relative_path(self.home.strings_file, self.home_folder)

    def validate(self) -> None:
        self.platform.validate()
        self.home.validate()
