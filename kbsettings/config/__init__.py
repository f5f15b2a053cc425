"""
Configuration management.

This package provides typed configuration models and loaders.
"""

from .models import AppConfig, ConfigError, HomeConfig, PlatformConfig, PreferencesConfig
from .loader import build_config_from_raw, default_config, load_config_from_file

__all__ = [
    "AppConfig",
    "ConfigError",
    "HomeConfig",
    "PlatformConfig",
    "PreferencesConfig",
    "build_config_from_raw",
    "default_config",
    "load_config_from_file",
]
