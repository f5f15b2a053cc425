"""
TUI (Text User Interface) module.

Provides the settings home and section screens built with Textual.
"""

from __future__ import annotations

__all__ = [
    "KeyboardSettingsApp",
    "run_tui",
]


def __getattr__(name: str):
    if name in __all__:
        from kbsettings.ui.tui.app import KeyboardSettingsApp, run_tui
        return {"KeyboardSettingsApp": KeyboardSettingsApp, "run_tui": run_tui}[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
