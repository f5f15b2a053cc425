"""Host platform collaborators: input-method status and URL launching."""

from __future__ import annotations

from .backends import (
    IBusInputMethodBackend,
    InputMethodBackend,
    PlatformQueryError,
    StaticInputMethodBackend,
)
from .factory import BACKEND_REGISTRY, create_backend
from .launcher import BrowserUrlLauncher, UrlLauncher
from .status import StatusFlag, SystemStatusProbe

__all__ = [
    "BACKEND_REGISTRY",
    "BrowserUrlLauncher",
    "IBusInputMethodBackend",
    "InputMethodBackend",
    "PlatformQueryError",
    "StaticInputMethodBackend",
    "StatusFlag",
    "SystemStatusProbe",
    "UrlLauncher",
    "create_backend",
]
