"""
Backend factory for input-method status sources.
"""

from __future__ import annotations

from typing import Callable, Dict

from kbsettings.config.models import ConfigError, PlatformConfig
from kbsettings.logging import get_logger
from .backends import IBusInputMethodBackend, InputMethodBackend, StaticInputMethodBackend

logger = get_logger(__name__)


def _static_backend(config: PlatformConfig) -> InputMethodBackend:
    return StaticInputMethodBackend(enabled=config.enabled, selected=config.selected)


def _ibus_backend(config: PlatformConfig) -> InputMethodBackend:
    return IBusInputMethodBackend(config.engine_id)


BACKEND_REGISTRY: Dict[str, Callable[[PlatformConfig], InputMethodBackend]] = {
    "static": _static_backend,
    "ibus": _ibus_backend,
}


def create_backend(config: PlatformConfig) -> InputMethodBackend:
    """
    Create the input-method backend named by ``config.backend``.

    Raises:
        ConfigError: If the backend name is not registered
    """
    name = config.backend.lower()
    if name not in BACKEND_REGISTRY:
        available = ", ".join(BACKEND_REGISTRY.keys())
        raise ConfigError(f"Unsupported platform backend: '{name}'. Available backends: {available}")

    logger.debug("Creating platform backend: %s", name)
    return BACKEND_REGISTRY[name](config)
