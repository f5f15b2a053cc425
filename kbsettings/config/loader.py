"""
Configuration loader.

Handles loading configuration from JSON/YAML files and converting
to typed dataclass models.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from .models import (
    AppConfig,
    ConfigError,
    HomeConfig,
    PlatformConfig,
    PreferencesConfig,
    DEFAULT_FEEDBACK_URL,
    DEFAULT_ENGINE_ID,
    DEFAULT_POLL_INTERVAL_S,
)


def load_raw_config(path: Path) -> Dict[str, Any]:
    """
    Load raw configuration from JSON or YAML file.

    Also loads environment variables from .env file if present.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Dictionary with raw configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigError: If the file format is unsupported or not a mapping
    """
    load_dotenv()

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    content = path.read_text(encoding="utf-8")
    return parse_config_text(content, path)


def parse_config_text(content: str, path: Path | str) -> Dict[str, Any]:
    """Parse config text according to the file suffix."""
    suffix = Path(path).suffix.lower()
    try:
        if suffix in {".yaml", ".yml"}:
            config = yaml.safe_load(content) or {}
        elif suffix == ".json":
            config = json.loads(content) if content.strip() else {}
        else:
            raise ConfigError(
                f"Unsupported config format: {suffix}. "
                f"Use .json, .yaml, or .yml"
            )
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc

    if not isinstance(config, dict):
        raise ConfigError(f"Top level of {path} must be a mapping")
    return config


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = raw.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{name}' must be a mapping")
    return value


def _as_bool(value: Any, key: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in {"true", "yes", "on", "1"}:
        return True
    if isinstance(value, str) and value.strip().lower() in {"false", "no", "off", "0"}:
        return False
    raise ConfigError(f"{key} must be a boolean, got {value!r}")


def build_preferences_config(raw: Dict[str, Any]) -> PreferencesConfig:
    path = raw.get("path")
    return PreferencesConfig(path=Path(path) if path else None)


def build_platform_config(raw: Dict[str, Any]) -> PlatformConfig:
    try:
        poll_interval = float(raw.get("poll_interval", DEFAULT_POLL_INTERVAL_S))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"platform.poll_interval must be a number, got {raw.get('poll_interval')!r}") from exc

    return PlatformConfig(
        backend=str(raw.get("backend", "static")),
        engine_id=str(raw.get("engine_id", DEFAULT_ENGINE_ID)),
        enabled=_as_bool(raw.get("enabled"), "platform.enabled", True),
        selected=_as_bool(raw.get("selected"), "platform.selected", True),
        foreground_only=_as_bool(raw.get("foreground_only"), "platform.foreground_only", True),
        poll_interval=poll_interval,
    )


def build_home_config(raw: Dict[str, Any]) -> HomeConfig:
    strings_file = raw.get("strings_file")
    return HomeConfig(
        feedback_url=str(raw.get("feedback_url") or DEFAULT_FEEDBACK_URL),
        strings_file=Path(strings_file) if strings_file else None,
    )


def build_config_from_raw(
    raw: Dict[str, Any],
    path: Optional[Path | str] = None,
    *,
    home_folder: Optional[Path | str] = None,
) -> AppConfig:
    """Build and validate an ``AppConfig`` from a raw mapping."""
    folder = home_folder if home_folder is not None else raw.get("home_folder")
    config = AppConfig(
        home_folder=Path(folder) if folder else None,
        preferences=build_preferences_config(_section(raw, "preferences")),
        platform=build_platform_config(_section(raw, "platform")),
        home=build_home_config(_section(raw, "home")),
        config_path=Path(path) if path is not None else None,
    )
    config.validate()
    return config


def load_config_from_file(
    path: Path | str,
    *,
    home_folder: Optional[Path | str] = None,
) -> AppConfig:
    """
    Load and validate configuration from file.

    Args:
        path: Path to config file (.json, .yaml, or .yml)
        home_folder: Overrides ``home_folder`` from the file

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigError: If configuration is invalid
    """
    if isinstance(path, str):
        path = Path(path)

    path = path.expanduser().resolve()

    raw = load_raw_config(path)
    return build_config_from_raw(raw, path, home_folder=home_folder)


def default_config(home_folder: Optional[Path | str] = None) -> AppConfig:
    """Return the built-in configuration."""
    load_dotenv()
    return build_config_from_raw({}, None, home_folder=home_folder)
