"""State models for TUI screens."""

from __future__ import annotations

from .home_view_model import BannerState, HomeSnapshot, HomeViewModel, banner_state
from .info_panel import InfoPanelContent, build_info_panel_content
from .menu import HOME_MENU_ENTRIES, MenuEntry, icon_glyph

__all__ = [
    "BannerState",
    "HOME_MENU_ENTRIES",
    "HomeSnapshot",
    "HomeViewModel",
    "InfoPanelContent",
    "MenuEntry",
    "banner_state",
    "build_info_panel_content",
    "icon_glyph",
]
