"""
Shared pytest fixtures for the keyboard settings tests.

Provides isolated home folders, sample configuration, and recording doubles
for every external collaborator the home screen talks to.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import pytest

from kbsettings.platform.backends import StaticInputMethodBackend
from kbsettings.prefs.store import PreferenceStore


# -----------------------------------------------------------------------------
# Environment Isolation
# -----------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Point KBSETTINGS_HOME at a temporary folder and clear env overrides.

    Keeps tests from reading or writing the developer's real preferences.
    """
    home = tmp_path / "kbsettings-home"
    monkeypatch.setenv("KBSETTINGS_HOME", str(home))
    monkeypatch.delenv("KBSETTINGS_BACKEND", raising=False)
    monkeypatch.delenv("KBSETTINGS_ENGINE_ID", raising=False)
    return home


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handler and level changes made by setup_logging()."""
    logger = logging.getLogger("kbsettings")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


# -----------------------------------------------------------------------------
# Configuration Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def sample_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Provide a minimal valid configuration dictionary for testing.
    """
    return {
        "preferences": {"path": str(tmp_path / "prefs.json")},
        "platform": {
            "backend": "static",
            "enabled": True,
            "selected": False,
            "poll_interval": 0.5,
        },
        "home": {"feedback_url": "https://example.com/feedback"},
    }


@pytest.fixture
def sample_config_file(tmp_path: Path, sample_config_dict: Dict[str, Any]) -> Path:
    """
    Create a temporary JSON config file for testing.
    """
    config_path = tmp_path / "test_config.json"
    config_path.write_text(json.dumps(sample_config_dict, indent=2))
    return config_path


# -----------------------------------------------------------------------------
# Collaborator Doubles
# -----------------------------------------------------------------------------

class RecordingNavigator:
    """Navigation dispatcher double that records every route."""

    def __init__(self) -> None:
        self.routes: list[str] = []

    def navigate(self, route: str) -> None:
        self.routes.append(route)


class RecordingLauncher:
    """URL launcher double that records every URL."""

    def __init__(self) -> None:
        self.urls: list[str] = []

    def launch(self, url: str) -> None:
        self.urls.append(url)


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def launcher() -> RecordingLauncher:
    return RecordingLauncher()


@pytest.fixture
def backend() -> StaticInputMethodBackend:
    return StaticInputMethodBackend(enabled=True, selected=True)


@pytest.fixture
def prefs_path(tmp_path: Path) -> Path:
    return tmp_path / "prefs" / "preferences.json"


@pytest.fixture
def store(prefs_path: Path) -> PreferenceStore:
    return PreferenceStore(prefs_path)
