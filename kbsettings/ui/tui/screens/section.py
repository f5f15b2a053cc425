"""
Placeholder destination for a settings section route.
"""

from __future__ import annotations

from typing import Any

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from kbsettings.logging import get_logger

logger = get_logger(__name__)


class SectionScreen(Screen):
    """Shows the section title for ``route`` and returns on escape."""

    BINDINGS = [
        Binding("escape", "go_back", "Back", show=True),
    ]

    def __init__(self, route: str, *, title: str, message: str, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.route = route
        self.section_title = title
        self.message = message

    def compose(self) -> ComposeResult:
        yield Header()
        yield Container(
            Static(self.section_title, classes="section-title", markup=False),
            Static(self.message, classes="section-message", markup=False),
            id="section-container",
        )
        yield Footer()

    def on_mount(self) -> None:
        logger.debug("Section screen mounted for route %s", self.route)

    def action_go_back(self) -> None:
        self.app.pop_screen()
