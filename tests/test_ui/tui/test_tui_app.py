from __future__ import annotations

import asyncio
from pathlib import Path
from types import SimpleNamespace

import pytest

from kbsettings.config import build_config_from_raw
from kbsettings.platform import StaticInputMethodBackend
from kbsettings.prefs import HOME_INFO_COLLAPSED, PreferenceStore
from kbsettings.resources import StringResources
from kbsettings.ui.tui.app import KeyboardSettingsApp, ScreenNavigator, run_tui
from kbsettings.ui.tui.navigation import Routes
from kbsettings.ui.tui.screens.home import HomeScreen
from kbsettings.ui.tui.screens.section import SectionScreen

pytestmark = pytest.mark.tui_fast


@pytest.fixture
def app_parts(tmp_path: Path, launcher):
    config = build_config_from_raw(
        {
            "preferences": {"path": str(tmp_path / "prefs.json")},
            "platform": {"poll_interval": 3.0},
            "home": {"feedback_url": "https://example.com/feedback"},
        }
    )
    backend = StaticInputMethodBackend(enabled=True, selected=False)
    store = PreferenceStore(config.preferences.path)
    app = KeyboardSettingsApp(config, store=store, backend=backend, launcher=launcher)
    return app, backend, store


def test_app_wires_collaborators(app_parts, launcher) -> None:
    app, backend, store = app_parts
    assert app.store is store
    assert app.probe.backend is backend
    assert app.launcher is launcher
    assert isinstance(app.navigator, ScreenNavigator)
    assert app.title == "Settings"


def test_app_defaults_come_from_config(tmp_path: Path) -> None:
    config = build_config_from_raw(
        {
            "preferences": {"path": str(tmp_path / "prefs.json")},
            "platform": {"backend": "static", "enabled": False},
        }
    )
    app = KeyboardSettingsApp(config)
    assert app.store.path == (tmp_path / "prefs.json").resolve()
    assert app.probe.observe_enabled().value is False


def test_build_home_screen(app_parts) -> None:
    app, _, store = app_parts
    screen = app.build_home_screen()

    assert isinstance(screen, HomeScreen)
    assert screen.id == "home"
    assert len(screen.view_model.entries) == 12
    assert screen.view_model.feedback_url == "https://example.com/feedback"
    assert screen.view_model.snapshot().ime_selected is False

    store.set(HOME_INFO_COLLAPSED, True)
    assert screen.view_model.snapshot().is_collapsed is True


def test_on_mount_pushes_home_screen(app_parts, monkeypatch: pytest.MonkeyPatch) -> None:
    app, _, _ = app_parts
    pushed = []
    monkeypatch.setattr(app, "push_screen", pushed.append)

    app.on_mount()

    assert len(pushed) == 1
    assert isinstance(pushed[0], HomeScreen)


def test_navigator_pushes_section_screen(app_parts, monkeypatch: pytest.MonkeyPatch) -> None:
    app, _, _ = app_parts
    pushed = []
    monkeypatch.setattr(app, "push_screen", pushed.append)

    app.navigator.navigate(Routes.Settings.THEME)
    app.navigator.navigate("settings/unknown")

    assert [screen.route for screen in pushed] == [Routes.Settings.THEME, "settings/unknown"]
    assert all(isinstance(screen, SectionScreen) for screen in pushed)
    assert pushed[0].section_title == "Theme"
    assert pushed[1].section_title == "settings/unknown"
    assert pushed[0].message == StringResources().resolve("section__placeholder")


def test_focus_events_drive_probe_foreground(app_parts, monkeypatch: pytest.MonkeyPatch) -> None:
    app, backend, _ = app_parts
    selected = app.probe.observe_selected()
    started = []
    monkeypatch.setattr(
        app,
        "run_worker",
        lambda work, **kwargs: started.append((work, kwargs)),
    )

    app.on_app_blur(SimpleNamespace())
    assert app.probe.is_foreground is False

    backend.set_state(selected=True)
    app.on_app_focus(SimpleNamespace())

    assert app.probe.is_foreground is True
    assert selected.value is False
    assert len(started) == 1
    work, kwargs = started[0]
    assert kwargs == {"group": "status-foreground", "exclusive": True}

    asyncio.run(work)
    assert selected.value is True


def test_focus_without_blur_does_not_resample(app_parts, monkeypatch: pytest.MonkeyPatch) -> None:
    app, _, _ = app_parts
    started = []
    monkeypatch.setattr(app, "run_worker", lambda work, **kwargs: started.append(work))

    app.on_app_focus(SimpleNamespace())

    assert started == []


def test_section_screen_back_pops(monkeypatch: pytest.MonkeyPatch) -> None:
    popped = []

    class _TestableSectionScreen(SectionScreen):
        @property
        def app(self):  # type: ignore[override]
            return SimpleNamespace(pop_screen=lambda: popped.append(True))

    screen = _TestableSectionScreen("settings/theme", title="Theme", message="soon")
    screen.action_go_back()

    assert popped == [True]


def test_run_tui_runs_app(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    ran = []
    monkeypatch.setattr(KeyboardSettingsApp, "run", lambda self: ran.append(self))
    config = build_config_from_raw({"preferences": {"path": str(tmp_path / "prefs.json")}})

    assert run_tui(config) == 0
    assert len(ran) == 1
