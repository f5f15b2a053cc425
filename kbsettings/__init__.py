from __future__ import annotations

from importlib import import_module
from typing import Any

__version__ = "0.3.0"

_LAZY_EXPORTS = {
    "PreferenceStore": ("kbsettings.prefs", "PreferenceStore"),
    "SystemStatusProbe": ("kbsettings.platform", "SystemStatusProbe"),
    "run_tui": ("kbsettings.ui.tui.app", "run_tui"),
}

__all__ = ["__version__", "PreferenceStore", "SystemStatusProbe", "run_tui"]


def __getattr__(name: str) -> Any:
    if name in _LAZY_EXPORTS:
        module_name, attr_name = _LAZY_EXPORTS[name]
        module = import_module(module_name)
        value = getattr(module, attr_name)
        globals()[name] = value
        return value
    raise AttributeError(f"module 'kbsettings' has no attribute '{name}'")
