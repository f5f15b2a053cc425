"""URL launching."""

from __future__ import annotations

import webbrowser
from typing import Protocol

from kbsettings.logging import get_logger

logger = get_logger(__name__)


class UrlLauncher(Protocol):
    def launch(self, url: str) -> None:
        ...


class BrowserUrlLauncher:
    """Opens URLs in the user's default browser without waiting on it."""

    def launch(self, url: str) -> None:
        logger.info("Opening %s", url)
        try:
            opened = webbrowser.open(url, new=2)
        except webbrowser.Error as exc:
            logger.warning("No browser available to open %s: %s", url, exc)
            return
        if not opened:
            logger.warning("No browser handler accepted %s", url)
