"""
Main TUI application.

Hosts the settings home screen and pushes a section screen for every route the
home menu navigates to. Terminal focus changes are forwarded to the status
probe so foreground-only status channels freeze while the app is unfocused.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from textual import events
from textual.app import App
from textual.binding import Binding

from kbsettings import __version__
from kbsettings.logging import get_logger
from kbsettings.platform.backends import InputMethodBackend
from kbsettings.platform.factory import create_backend
from kbsettings.platform.launcher import BrowserUrlLauncher, UrlLauncher
from kbsettings.platform.status import SystemStatusProbe
from kbsettings.prefs.store import HOME_INFO_COLLAPSED, PreferenceStore
from kbsettings.resources import StringResources
from kbsettings.ui.tui.screens.home import HomeScreen
from kbsettings.ui.tui.screens.section import SectionScreen
from kbsettings.ui.tui.state.home_view_model import HomeViewModel
from kbsettings.ui.tui.state.info_panel import build_info_panel_content
from kbsettings.ui.tui.state.menu import HOME_MENU_ENTRIES, find_entry

if TYPE_CHECKING:
    from kbsettings.config.models import AppConfig

logger = get_logger(__name__)


class ScreenNavigator:
    """Navigation dispatcher that pushes a ``SectionScreen`` per route."""

    def __init__(self, app: "KeyboardSettingsApp") -> None:
        self._app = app

    def navigate(self, route: str) -> None:
        strings = self._app.strings
        entry = find_entry(route)
        title = strings.resolve(entry.label_key) if entry is not None else route
        logger.info("Opening section %s", route)
        self._app.push_screen(
            SectionScreen(
                route,
                title=title,
                message=strings.resolve("section__placeholder"),
            )
        )


class KeyboardSettingsApp(App):
    """
    Keyboard settings TUI application.
    """

    TITLE = "Keyboard Settings"

    CSS_PATH = "styles/home.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        config: "AppConfig",
        *,
        store: Optional[PreferenceStore] = None,
        backend: Optional[InputMethodBackend] = None,
        launcher: Optional[UrlLauncher] = None,
        strings: Optional[StringResources] = None,
    ) -> None:
        """
        Initialize the application and its collaborators.

        Args:
            config: Application configuration
            store: Preference store (defaults to the configured JSON file)
            backend: Input-method backend (defaults to ``config.platform.backend``)
            launcher: URL launcher (defaults to the system browser)
            strings: String resources (defaults to built-ins plus overrides file)
        """
        super().__init__()
        self.config = config
        self.strings = strings or StringResources.from_file(config.home.strings_file)
        self.store = store or PreferenceStore(config.preferences.path)
        self.probe = SystemStatusProbe(backend or create_backend(config.platform))
        self.launcher = launcher or BrowserUrlLauncher()
        self.navigator = ScreenNavigator(self)
        self.title = self.strings.resolve("settings__home__title")

    def build_home_screen(self) -> HomeScreen:
        """Wire a fresh view model and home screen."""
        platform = self.config.platform
        view_model = HomeViewModel(
            self.store.observe(HOME_INFO_COLLAPSED),
            self.probe,
            self.navigator,
            self.launcher,
            feedback_url=self.config.home.feedback_url,
            entries=HOME_MENU_ENTRIES,
            foreground_only=platform.foreground_only,
        )
        return HomeScreen(
            view_model,
            strings=self.strings,
            content=build_info_panel_content(__version__, self.config.home.feedback_url),
            poll_interval=platform.poll_interval,
            id="home",
        )

    def on_mount(self) -> None:
        logger.debug("App mounted; pushing home screen")
        self.push_screen(self.build_home_screen())

    def on_app_focus(self, event: events.AppFocus) -> None:
        if self.probe.is_foreground:
            return
        self.probe.set_foreground(True, resample=False)
        self.run_worker(self.probe.refresh_async(), group="status-foreground", exclusive=True)

    def on_app_blur(self, event: events.AppBlur) -> None:
        self.probe.set_foreground(False)


def run_tui(config: "AppConfig") -> int:
    """
    Run the TUI application.

    Args:
        config: Application configuration

    Returns:
        Exit code (0 for success)
    """
    app = KeyboardSettingsApp(config)
    app.run()
    return 0
