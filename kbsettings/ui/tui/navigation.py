"""Route identifiers and the navigation seam."""

from __future__ import annotations

from typing import Protocol


class Routes:
    """Destination route ids. Only the navigator interprets them."""

    class Settings:
        LOCALIZATION = "settings/localization"
        THEME = "settings/theme"
        KEYBOARD = "settings/keyboard"
        SMARTBAR = "settings/smartbar"
        TYPING = "settings/typing"
        SPELLING = "settings/spelling"
        DICTIONARY = "settings/dictionary"
        GESTURES = "settings/gestures"
        CLIPBOARD = "settings/clipboard"
        ADVANCED = "settings/advanced"
        ABOUT = "settings/about"

    class Devtools:
        HOME = "devtools"


class NavigationDispatcher(Protocol):
    """Performs the screen transition for a route. Fire-and-forget."""

    def navigate(self, route: str) -> None:
        ...
