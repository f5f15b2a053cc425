"""Home screen view model and immutable render snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from kbsettings.logging import get_logger
from kbsettings.observable import SubscriptionScope
from kbsettings.platform.launcher import UrlLauncher
from kbsettings.platform.status import SystemStatusProbe
from kbsettings.prefs.store import PreferenceFlag
from kbsettings.ui.tui.navigation import NavigationDispatcher
from kbsettings.ui.tui.state.menu import HOME_MENU_ENTRIES, MenuEntry

logger = get_logger(__name__)


class BannerState(str, Enum):
    """Which status banner the home screen shows."""

    NONE = "none"
    ERROR = "error"
    WARNING = "warning"


def banner_state(enabled: bool, selected: bool) -> BannerState:
    """Pick the banner for the current input-method status.

    A keyboard that is not enabled always shows the error banner, whatever the
    selection says; the warning only applies to an enabled keyboard.
    """
    if not enabled:
        return BannerState.ERROR
    if not selected:
        return BannerState.WARNING
    return BannerState.NONE


BANNER_TEXT_KEYS: dict[BannerState, str] = {
    BannerState.ERROR: "settings__home__ime_not_enabled",
    BannerState.WARNING: "settings__home__ime_not_selected",
}


@dataclass(frozen=True)
class HomeSnapshot:
    """Immutable snapshot of everything one home render pass reads."""

    ime_enabled: bool
    ime_selected: bool
    is_collapsed: bool

    @property
    def banner(self) -> BannerState:
        return banner_state(self.ime_enabled, self.ime_selected)

    @property
    def body_visible(self) -> bool:
        return not self.is_collapsed

    @property
    def toggle_icon(self) -> str:
        return "keyboard_arrow_down" if self.is_collapsed else "keyboard_arrow_up"


class HomeViewModel:
    """Binds the collapsed flag and status probes to the home screen.

    Every user action is forwarded to an injected collaborator; the view model
    only owns the subscriptions that keep the screen current.
    """

    def __init__(
        self,
        collapsed_flag: PreferenceFlag,
        probe: SystemStatusProbe,
        navigator: NavigationDispatcher,
        launcher: UrlLauncher,
        *,
        feedback_url: str,
        entries: tuple[MenuEntry, ...] = HOME_MENU_ENTRIES,
        foreground_only: bool = True,
    ) -> None:
        self._collapsed = collapsed_flag
        self._probe = probe
        self._navigator = navigator
        self._launcher = launcher
        self._entries = tuple(entries)
        self.feedback_url = feedback_url
        self._enabled = probe.observe_enabled(foreground_only=foreground_only)
        self._selected = probe.observe_selected(foreground_only=foreground_only)
        self._scope = SubscriptionScope()
        self._listener: Optional[Callable[[HomeSnapshot], None]] = None

    @property
    def entries(self) -> tuple[MenuEntry, ...]:
        return self._entries

    @property
    def is_bound(self) -> bool:
        return self._listener is not None

    def snapshot(self) -> HomeSnapshot:
        return HomeSnapshot(
            ime_enabled=self._enabled.value,
            ime_selected=self._selected.value,
            is_collapsed=self._collapsed.value,
        )

    def bind(self, listener: Callable[[HomeSnapshot], None]) -> HomeSnapshot:
        """Start delivering a fresh snapshot to ``listener`` on every change.

        Returns the snapshot to render right away.
        """
        self.release()
        self._listener = listener
        for source in (self._enabled, self._selected, self._collapsed):
            self._scope.add(source.subscribe(self._on_source_changed))
        return self.snapshot()

    def release(self) -> None:
        """Drop every subscription taken by ``bind``."""
        released = self._scope.release_all()
        if released:
            logger.debug("Released %d home screen subscriptions", released)
        self._listener = None

    def toggle_collapsed(self) -> bool:
        """Flip the info panel flag and return the new collapsed value."""
        return self._collapsed.toggle()

    def activate_banner(self) -> BannerState:
        """Run the action for the banner currently shown."""
        state = self.snapshot().banner
        if state is BannerState.ERROR:
            self._probe.open_enabler()
        elif state is BannerState.WARNING:
            self._probe.open_picker()
        return state

    def open_entry(self, index: int) -> MenuEntry:
        """Navigate to the route of the entry at ``index``."""
        entry = self._entries[index]
        self.navigate(entry.route)
        return entry

    def navigate(self, route: str) -> None:
        logger.debug("Navigating to %s", route)
        self._navigator.navigate(route)

    def open_feedback(self) -> None:
        self._launcher.launch(self.feedback_url)

    def refresh_status(self) -> None:
        self._probe.refresh()

    async def refresh_status_async(self) -> None:
        """Resample the probe without blocking the calling event loop."""
        await self._probe.refresh_async()

    def _on_source_changed(self, _value: bool) -> None:
        listener = self._listener
        if listener is not None:
            listener(self.snapshot())
