"""
Collapsible info panel for the home screen.
"""

from __future__ import annotations

from typing import Any

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static

from kbsettings.ui.tui.state.home_view_model import HomeSnapshot
from kbsettings.ui.tui.state.info_panel import InfoPanelContent
from kbsettings.ui.tui.state.menu import icon_glyph


class InfoPanel(Vertical):
    """Header row with a toggle, plus a body shown only when expanded."""

    def __init__(self, content: InfoPanelContent, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("classes", "info-panel")
        super().__init__(*args, **kwargs)
        self.panel_content = content

    def compose(self) -> ComposeResult:
        content = self.panel_content
        with Horizontal(classes="info-panel-header"):
            yield Static(content.title, classes="info-panel-title", markup=False)
            yield Button(
                icon_glyph("keyboard_arrow_down"),
                id="home-info-toggle",
                classes="info-panel-toggle",
            )
        with Vertical(id="home-info-body", classes="info-panel-body"):
            for paragraph in content.intro:
                yield Static(paragraph, classes="info-panel-text", markup=False)
            yield Button(content.feedback_label, id="home-feedback-button", variant="primary")
            yield Static(content.version_line, classes="info-panel-text", markup=False)
            yield Static(content.features_heading, classes="info-panel-text", markup=False)
            for feature in content.features:
                yield Static(feature, classes="info-panel-feature", markup=False)
            yield Static(content.closing_note, classes="info-panel-text", markup=False)

    def show(self, snapshot: HomeSnapshot) -> None:
        """Sync toggle icon and body visibility with ``snapshot``."""
        self.query_one("#home-info-toggle", Button).label = icon_glyph(snapshot.toggle_icon)
        self.query_one("#home-info-body", Vertical).display = snapshot.body_visible
