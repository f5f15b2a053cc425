"""
Status banner for the home screen.
"""

from __future__ import annotations

from typing import Any

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Static

from kbsettings.ui.tui.state.home_view_model import BannerState


class StatusBanner(Horizontal):
    """Single banner slot whose severity follows the current ``BannerState``.

    Hidden entirely for ``BannerState.NONE``; styled ``-error`` or ``-warning``
    otherwise. Pressing the action button posts a regular ``Button.Pressed``
    with id ``home-banner-action``.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("classes", "status-banner")
        super().__init__(*args, **kwargs)
        self.state = BannerState.NONE

    def compose(self) -> ComposeResult:
        yield Static("", id="home-banner-text", markup=False)
        yield Button("Fix", id="home-banner-action", classes="status-banner-action")

    def show_state(self, state: BannerState, text: str) -> None:
        self.state = state
        self.set_class(state is BannerState.ERROR, "-error")
        self.set_class(state is BannerState.WARNING, "-warning")
        self.display = state is not BannerState.NONE
        if state is not BannerState.NONE:
            self.query_one("#home-banner-text", Static).update(text)
