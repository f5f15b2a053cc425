from __future__ import annotations

import asyncio
import threading

import pytest

from kbsettings.platform import PlatformQueryError, StaticInputMethodBackend, SystemStatusProbe


class _FlakyBackend(StaticInputMethodBackend):
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.fail = False

    def is_enabled(self) -> bool:
        if self.fail:
            raise PlatformQueryError("daemon gone")
        return super().is_enabled()

    def is_selected(self) -> bool:
        if self.fail:
            raise PlatformQueryError("daemon gone")
        return super().is_selected()


def test_channels_start_with_sampled_values() -> None:
    backend = StaticInputMethodBackend(enabled=True, selected=False)
    probe = SystemStatusProbe(backend)

    assert probe.observe_enabled().value is True
    assert probe.observe_selected().value is False


def test_channels_are_shared_per_mode() -> None:
    probe = SystemStatusProbe(StaticInputMethodBackend())

    assert probe.observe_enabled() is probe.observe_enabled(foreground_only=True)
    assert probe.observe_enabled(foreground_only=False) is not probe.observe_enabled()
    assert probe.observe_enabled().name == "enabled (foreground only)"
    assert probe.observe_selected(foreground_only=False).name == "selected"


def test_refresh_publishes_changes_once() -> None:
    backend = StaticInputMethodBackend(enabled=False, selected=False)
    probe = SystemStatusProbe(backend)
    seen: list[bool] = []
    probe.observe_enabled().subscribe(seen.append)

    backend.set_state(enabled=True)
    probe.refresh()
    probe.refresh()

    assert seen == [True]


def test_refresh_without_channels_does_not_query() -> None:
    backend = StaticInputMethodBackend()
    SystemStatusProbe(backend).refresh()
    assert backend.query_count == 0


def test_background_freezes_foreground_only_channels() -> None:
    backend = StaticInputMethodBackend(enabled=True, selected=True)
    probe = SystemStatusProbe(backend)
    frozen = probe.observe_selected(foreground_only=True)
    live = probe.observe_selected(foreground_only=False)

    probe.set_foreground(False)
    queries = backend.query_count
    backend.set_state(selected=False)
    probe.refresh()

    assert frozen.value is True
    assert live.value is False
    assert backend.query_count == queries + 1


def test_background_with_only_foreground_channels_skips_queries() -> None:
    backend = StaticInputMethodBackend()
    probe = SystemStatusProbe(backend)
    probe.observe_enabled()
    probe.observe_selected()

    probe.set_foreground(False)
    queries = backend.query_count
    probe.refresh()

    assert backend.query_count == queries


def test_returning_to_foreground_resamples_eagerly() -> None:
    backend = StaticInputMethodBackend(enabled=True, selected=True)
    probe = SystemStatusProbe(backend)
    seen: list[bool] = []
    probe.observe_selected().subscribe(seen.append)

    probe.set_foreground(False)
    backend.set_state(selected=False)
    assert seen == []

    probe.set_foreground(True)
    assert seen == [False]
    assert probe.is_foreground is True


def test_repeated_foreground_signal_does_not_resample() -> None:
    backend = StaticInputMethodBackend()
    probe = SystemStatusProbe(backend)
    probe.observe_enabled()
    queries = backend.query_count

    probe.set_foreground(True)

    assert backend.query_count == queries


def test_query_failure_keeps_last_value(caplog: pytest.LogCaptureFixture) -> None:
    backend = _FlakyBackend(enabled=True, selected=True)
    probe = SystemStatusProbe(backend)
    enabled = probe.observe_enabled()

    backend.fail = True
    probe.refresh()

    assert enabled.value is True
    assert "query failed" in caplog.text


def test_initial_query_failure_defaults_to_false() -> None:
    backend = _FlakyBackend()
    backend.fail = True
    probe = SystemStatusProbe(backend)

    assert probe.observe_enabled().value is False
    assert probe.observe_selected().value is False


def test_new_channel_reuses_last_sample() -> None:
    backend = StaticInputMethodBackend()
    probe = SystemStatusProbe(backend)
    probe.observe_enabled()
    queries = backend.query_count

    probe.observe_enabled(foreground_only=False)

    assert backend.query_count == queries


def test_actions_delegate_to_backend() -> None:
    backend = StaticInputMethodBackend(enabled=False, selected=False)
    probe = SystemStatusProbe(backend)

    probe.open_enabler()
    probe.open_picker()

    assert backend.actions == ["open_enabler", "open_picker"]
    assert probe.backend is backend


class _BlockingBackend(StaticInputMethodBackend):
    """Backend whose queries block until the test releases them."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.block = False
        self.entered = threading.Event()
        self.release = threading.Event()
        self.query_threads: set[int] = set()

    def is_enabled(self) -> bool:
        self.query_threads.add(threading.get_ident())
        if self.block:
            self.entered.set()
            self.release.wait(timeout=5)
        return super().is_enabled()


def test_refresh_async_keeps_event_loop_running_while_backend_blocks() -> None:
    backend = _BlockingBackend(enabled=True, selected=True)
    probe = SystemStatusProbe(backend)
    enabled = probe.observe_enabled()
    notified_on: list[int] = []
    enabled.subscribe(lambda _value: notified_on.append(threading.get_ident()))
    backend.block = True
    backend.set_state(enabled=False)

    async def scenario() -> int:
        refresh = asyncio.create_task(probe.refresh_async())
        ticks = 0
        while not backend.entered.is_set():
            await asyncio.sleep(0.01)
        for _ in range(5):
            await asyncio.sleep(0.01)
            ticks += 1
        assert not refresh.done()
        assert probe.is_refreshing is True
        backend.release.set()
        await refresh
        return ticks

    loop_thread = threading.get_ident()
    assert asyncio.run(scenario()) == 5
    assert enabled.value is False
    assert notified_on == [loop_thread]
    assert any(ident != loop_thread for ident in backend.query_threads)
    assert probe.is_refreshing is False


def test_refresh_async_skips_while_another_refresh_waits() -> None:
    backend = _BlockingBackend(enabled=True, selected=True)
    probe = SystemStatusProbe(backend)
    probe.observe_enabled()
    backend.block = True

    async def scenario() -> None:
        first = asyncio.create_task(probe.refresh_async())
        while not backend.entered.is_set():
            await asyncio.sleep(0.01)
        queries = backend.query_count
        await probe.refresh_async()
        assert backend.query_count == queries
        backend.release.set()
        await first

    asyncio.run(scenario())


def test_refresh_async_without_channels_does_not_query() -> None:
    backend = StaticInputMethodBackend()
    asyncio.run(SystemStatusProbe(backend).refresh_async())
    assert backend.query_count == 0


def test_sample_leaves_channels_untouched_until_applied() -> None:
    backend = StaticInputMethodBackend(enabled=True, selected=True)
    probe = SystemStatusProbe(backend)
    selected = probe.observe_selected()

    backend.set_state(selected=False)
    samples = probe.sample()
    assert samples == {"selected": False}
    assert selected.value is True

    probe.apply(samples)
    assert selected.value is False


def test_foreground_without_resample_defers_query() -> None:
    backend = StaticInputMethodBackend(enabled=True, selected=True)
    probe = SystemStatusProbe(backend)
    selected = probe.observe_selected()
    probe.set_foreground(False)
    backend.set_state(selected=False)
    queries = backend.query_count

    probe.set_foreground(True, resample=False)

    assert backend.query_count == queries
    assert selected.value is True
    asyncio.run(probe.refresh_async())
    assert selected.value is False
