"""
Navigation list for the home screen.
"""

from __future__ import annotations

from typing import Any

from textual.widgets import Label, ListItem, ListView

from kbsettings.resources import StringResources
from kbsettings.ui.tui.state.menu import MenuEntry, icon_glyph


def format_entry_label(entry: MenuEntry, strings: StringResources) -> str:
    return f"{icon_glyph(entry.icon)}  {strings.resolve(entry.label_key)}"


class MenuItem(ListItem):
    """List row carrying the ``MenuEntry`` it renders."""

    def __init__(self, entry: MenuEntry, index: int, label: str) -> None:
        super().__init__(Label(label, markup=False), classes="home-menu-item")
        self.entry = entry
        self.entry_index = index


class HomeMenu(ListView):
    """Static, ordered list of section entries."""

    def __init__(
        self,
        entries: tuple[MenuEntry, ...],
        strings: StringResources,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        items = [
            MenuItem(entry, index, format_entry_label(entry, strings))
            for index, entry in enumerate(entries)
        ]
        super().__init__(*items, *args, **kwargs)
        self.entries = entries
