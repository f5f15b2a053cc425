"""Static navigation entries shown on the home screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from kbsettings.ui.tui.navigation import Routes


@dataclass(frozen=True)
class MenuEntry:
    """One navigation row: optional icon, label resource id and target route."""

    icon: Optional[str]
    label_key: str
    route: str


HOME_MENU_ENTRIES: tuple[MenuEntry, ...] = (
    MenuEntry("language", "settings__localization__title", Routes.Settings.LOCALIZATION),
    MenuEntry("palette", "settings__theme__title", Routes.Settings.THEME),
    MenuEntry("keyboard", "settings__keyboard__title", Routes.Settings.KEYBOARD),
    MenuEntry(None, "settings__smartbar__title", Routes.Settings.SMARTBAR),
    MenuEntry("settings_suggest", "settings__typing__title", Routes.Settings.TYPING),
    MenuEntry("spellcheck", "settings__spelling__title", Routes.Settings.SPELLING),
    MenuEntry("library_books", "settings__dictionary__title", Routes.Settings.DICTIONARY),
    MenuEntry("gesture", "settings__gestures__title", Routes.Settings.GESTURES),
    MenuEntry("assignment", "settings__clipboard__title", Routes.Settings.CLIPBOARD),
    MenuEntry("adb", "devtools__title", Routes.Devtools.HOME),
    MenuEntry("build", "settings__advanced__title", Routes.Settings.ADVANCED),
    MenuEntry("info", "about__title", Routes.Settings.ABOUT),
)

# Terminal stand-ins for the icon set.
ICON_GLYPHS: dict[str, str] = {
    "language": "🌐",
    "palette": "🎨",
    "keyboard": "⌨",
    "settings_suggest": "✎",
    "spellcheck": "✓",
    "library_books": "📚",
    "gesture": "〰",
    "assignment": "📋",
    "adb": "🐞",
    "build": "🔧",
    "info": "ℹ",
    "keyboard_arrow_down": "▼",
    "keyboard_arrow_up": "▲",
}


def icon_glyph(icon: Optional[str]) -> str:
    """Glyph for ``icon``; no icon (or an unknown one) renders as a blank."""
    if icon is None:
        return " "
    return ICON_GLYPHS.get(icon, " ")


def find_entry(route: str, entries: tuple[MenuEntry, ...] = HOME_MENU_ENTRIES) -> Optional[MenuEntry]:
    for entry in entries:
        if entry.route == route:
            return entry
    return None
