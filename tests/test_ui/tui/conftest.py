"""TUI-specific pytest configuration and fixtures.

This module provides:
- Test speed markers (tui_fast, tui_slow)
- A view model factory wired to a static backend and a temp preference store

Usage::

    @pytest.mark.tui_fast
    def test_something(view_model_factory):
        vm, backend, store = view_model_factory(enabled=False)
        ...
"""

from __future__ import annotations

import pytest

from kbsettings.platform import StaticInputMethodBackend, SystemStatusProbe
from kbsettings.prefs import HOME_INFO_COLLAPSED, PreferenceStore
from kbsettings.ui.tui.state import HomeViewModel


def pytest_configure(config):
    """Register TUI test markers."""
    config.addinivalue_line(
        "markers",
        "tui_fast: Fast unit tests with mocks/fakes, no app lifecycle (<100ms)",
    )
    config.addinivalue_line(
        "markers",
        "tui_slow: Slower tests with real app lifecycle (startup, mount, timers)",
    )


@pytest.fixture
def view_model_factory(prefs_path, navigator, launcher):
    """Build a ``HomeViewModel`` over a static backend and a temp store.

    Returns a callable ``(enabled, selected, collapsed)`` giving
    ``(view_model, backend, store)``.
    """

    def _create(enabled: bool = True, selected: bool = True, collapsed: bool = False):
        backend = StaticInputMethodBackend(enabled=enabled, selected=selected)
        store = PreferenceStore(prefs_path)
        store.set(HOME_INFO_COLLAPSED, collapsed)
        view_model = HomeViewModel(
            store.observe(HOME_INFO_COLLAPSED),
            SystemStatusProbe(backend),
            navigator,
            launcher,
            feedback_url="https://example.com/feedback",
        )
        return view_model, backend, store

    return _create
