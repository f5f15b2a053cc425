"""
TUI widget modules.

Contains custom widgets:
- StatusBanner: Error/warning banner for input-method status
- InfoPanel: Collapsible info card with feedback link
- HomeMenu: Navigation list of settings sections
"""

from __future__ import annotations

__all__ = [
    "StatusBanner",
    "InfoPanel",
    "HomeMenu",
    "MenuItem",
]

# Lazy imports to avoid circular dependencies
def __getattr__(name: str):
    if name == "StatusBanner":
        from kbsettings.ui.tui.widgets.banner import StatusBanner
        return StatusBanner
    elif name == "InfoPanel":
        from kbsettings.ui.tui.widgets.info_panel import InfoPanel
        return InfoPanel
    elif name == "HomeMenu":
        from kbsettings.ui.tui.widgets.menu import HomeMenu
        return HomeMenu
    elif name == "MenuItem":
        from kbsettings.ui.tui.widgets.menu import MenuItem
        return MenuItem
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
