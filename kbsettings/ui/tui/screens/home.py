"""
Settings home screen.

Shows the input-method status banner, the collapsible info panel and the list
of settings sections. All state comes from ``HomeViewModel``; this screen only
maps snapshots onto widgets and user input onto view model actions. Status
refreshes run as workers so slow backend queries never hold the event loop.
"""

from __future__ import annotations

from typing import Any, Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import Button, Footer, Header, ListView

from kbsettings.logging import get_logger
from kbsettings.resources import StringResources
from kbsettings.ui.tui.screens.base import ManagedScreenMixin
from kbsettings.ui.tui.state.home_view_model import (
    BANNER_TEXT_KEYS,
    HomeSnapshot,
    HomeViewModel,
)
from kbsettings.ui.tui.state.info_panel import InfoPanelContent
from kbsettings.ui.tui.widgets.banner import StatusBanner
from kbsettings.ui.tui.widgets.info_panel import InfoPanel
from kbsettings.ui.tui.widgets.menu import HomeMenu

logger = get_logger(__name__)


class HomeScreen(ManagedScreenMixin, Screen):
    """Root screen of the settings app. Offers no back action."""

    BINDINGS = [
        Binding("i", "toggle_info", "Toggle info", show=True),
        Binding("r", "refresh_status", "Refresh status", show=True),
    ]

    def __init__(
        self,
        view_model: HomeViewModel,
        *,
        strings: StringResources,
        content: InfoPanelContent,
        poll_interval: float,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._view_model = view_model
        self._strings = strings
        self._panel_content = content
        self._poll_interval = poll_interval
        self._poll_timer: Optional[Timer] = None
        self.last_snapshot: Optional[HomeSnapshot] = None

    @property
    def view_model(self) -> HomeViewModel:
        return self._view_model

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="home-layout"):
            yield StatusBanner(id="home-banner")
            yield InfoPanel(self._panel_content, id="home-info")
            yield HomeMenu(self._view_model.entries, self._strings, id="home-menu")
        yield Footer()

    def on_mount(self) -> None:
        logger.debug("Home screen mounted")
        self._apply_snapshot(self._view_model.bind(self._apply_snapshot))
        self._poll_timer = self._start_timer(
            interval_seconds=self._poll_interval,
            callback=self.action_refresh_status,
        )

    def on_unmount(self) -> None:
        self._view_model.release()
        self._stop_timer(self._poll_timer)
        self._poll_timer = None
        logger.debug("Home screen unmounted")

    def on_screen_suspend(self) -> None:
        self._pause_timer(self._poll_timer)

    def on_screen_resume(self) -> None:
        self._resume_timer(self._poll_timer)
        self.action_refresh_status()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id == "home-banner-action":
            self._run_action("Open system settings", self._activate_banner)
        elif button_id == "home-info-toggle":
            self.action_toggle_info()
        elif button_id == "home-feedback-button":
            self._run_action("Open feedback thread", self._view_model.open_feedback)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if getattr(event.list_view, "id", None) != "home-menu":
            return
        index = getattr(event.item, "entry_index", None)
        if index is None:
            return
        self._run_action("Open section", lambda: self._view_model.open_entry(index))

    def action_toggle_info(self) -> None:
        self._run_action("Toggle info panel", self._view_model.toggle_collapsed)

    def action_refresh_status(self) -> None:
        self._start_worker(
            work_factory=self._refresh_status,
            group="home-status",
            exclusive=False,
        )

    async def _refresh_status(self) -> None:
        await self._run_action_async("Refresh status", self._view_model.refresh_status_async)

    def _activate_banner(self) -> None:
        self._view_model.activate_banner()
        self.action_refresh_status()

    def _apply_snapshot(self, snapshot: HomeSnapshot) -> None:
        self.last_snapshot = snapshot
        state = snapshot.banner
        text_key = BANNER_TEXT_KEYS.get(state)
        text = self._strings.resolve(text_key) if text_key else ""
        try:
            self.query_one("#home-banner", StatusBanner).show_state(state, text)
            self.query_one("#home-info", InfoPanel).show(snapshot)
        except NoMatches:
            logger.debug("Home widgets not composed yet; snapshot kept for later")
