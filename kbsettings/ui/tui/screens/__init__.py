"""
TUI screen modules.

Contains screen classes for different views:
- HomeScreen: Settings home with status banner, info panel and section list
- SectionScreen: Destination shown for a section route
"""

from __future__ import annotations

__all__ = [
    "HomeScreen",
    "SectionScreen",
]

# Lazy imports to avoid circular dependencies
def __getattr__(name: str):
    if name == "HomeScreen":
        from kbsettings.ui.tui.screens.home import HomeScreen
        return HomeScreen
    elif name == "SectionScreen":
        from kbsettings.ui.tui.screens.section import SectionScreen
        return SectionScreen
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
