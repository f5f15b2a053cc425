"""Screen presenters: rendering logic testable without the widget tree."""

from __future__ import annotations

from kbsettings.ui.tui.presenters.home import (
    format_banner,
    format_home_outline,
    format_info_panel,
    format_menu,
)

__all__ = [
    "format_banner",
    "format_home_outline",
    "format_info_panel",
    "format_menu",
]
