"""Derived input-method status flags.

``SystemStatusProbe`` turns backend queries into observables. A channel opened
with ``foreground_only=True`` is frozen while the host app is in the
background and resampled as soon as it returns to the foreground.

Backend queries may shell out and block. ``refresh_async`` runs them in a
worker thread and publishes the results back on the awaiting event loop, so
subscribers are always notified from a single thread.
"""

from __future__ import annotations

import asyncio
from typing import Literal, Optional

from kbsettings.logging import get_logger
from kbsettings.observable import Observable
from kbsettings.platform.backends import InputMethodBackend, PlatformQueryError

logger = get_logger(__name__)

Condition = Literal["enabled", "selected"]


class StatusFlag(Observable[bool]):
    """Read-only observable for one (condition, foreground_only) channel."""

    def __init__(self, condition: Condition, foreground_only: bool, value: bool) -> None:
        suffix = " (foreground only)" if foreground_only else ""
        super().__init__(value, name=f"{condition}{suffix}")
        self.condition = condition
        self.foreground_only = foreground_only


class SystemStatusProbe:
    """Samples the input-method backend and publishes the results."""

    def __init__(self, backend: InputMethodBackend, *, foreground: bool = True) -> None:
        self._backend = backend
        self._foreground = foreground
        self._channels: dict[tuple[Condition, bool], StatusFlag] = {}
        self._last: dict[Condition, bool] = {}
        self._refreshing = False

    @property
    def backend(self) -> InputMethodBackend:
        return self._backend

    @property
    def is_foreground(self) -> bool:
        return self._foreground

    @property
    def is_refreshing(self) -> bool:
        return self._refreshing

    def observe_enabled(self, foreground_only: bool = True) -> StatusFlag:
        return self._channel("enabled", foreground_only)

    def observe_selected(self, foreground_only: bool = True) -> StatusFlag:
        return self._channel("selected", foreground_only)

    def sample(self) -> dict[Condition, bool]:
        """Query the backend for every condition a live channel needs.

        Blocking and free of side effects on the channels, so it may run on a
        worker thread. Failed queries are left out of the result.
        """
        samples: dict[Condition, bool] = {}
        for condition in sorted(self._wanted_conditions()):
            value = self._sample(condition)
            if value is not None:
                samples[condition] = value
        return samples

    def apply(self, samples: dict[Condition, bool]) -> None:
        """Publish sampled values into the matching channels.

        Must be called from the thread that owns the subscribers.
        """
        for condition, value in samples.items():
            self._last[condition] = value
            for (channel_condition, foreground_only), channel in self._channels.items():
                if channel_condition != condition:
                    continue
                if foreground_only and not self._foreground:
                    continue
                channel._publish(value)

    def refresh(self) -> None:
        """Sample the backend and push values into every live channel."""
        self.apply(self.sample())

    async def refresh_async(self) -> None:
        """Like ``refresh``, with the backend queries run in a worker thread.

        A call made while another refresh is still waiting on the backend
        returns without querying.
        """
        if self._refreshing or not self._wanted_conditions():
            return
        self._refreshing = True
        try:
            samples = await asyncio.to_thread(self.sample)
        finally:
            self._refreshing = False
        self.apply(samples)

    def set_foreground(self, foreground: bool, *, resample: bool = True) -> None:
        """Record a host foreground change.

        Returning to the foreground resamples immediately unless ``resample``
        is False, in which case the caller schedules ``refresh_async`` itself.
        """
        foreground = bool(foreground)
        if foreground == self._foreground:
            return
        self._foreground = foreground
        logger.debug("Host moved to %s", "foreground" if foreground else "background")
        if foreground and resample:
            self.refresh()

    def open_enabler(self) -> None:
        logger.info("Opening input-method enabler")
        self._backend.open_enabler()

    def open_picker(self) -> None:
        logger.info("Opening input-method picker")
        self._backend.open_picker()

    def _wanted_conditions(self) -> set[Condition]:
        return {
            condition
            for (condition, foreground_only) in self._channels
            if self._foreground or not foreground_only
        }

    def _channel(self, condition: Condition, foreground_only: bool) -> StatusFlag:
        key = (condition, bool(foreground_only))
        channel = self._channels.get(key)
        if channel is not None:
            return channel

        value = self._last.get(condition)
        if value is None:
            value = self._sample(condition)
            if value is not None:
                self._last[condition] = value
        channel = StatusFlag(condition, key[1], bool(value))
        self._channels[key] = channel
        return channel

    def _sample(self, condition: Condition) -> Optional[bool]:
        try:
            if condition == "enabled":
                return bool(self._backend.is_enabled())
            return bool(self._backend.is_selected())
        except PlatformQueryError as exc:
            logger.warning("Input-method %s query failed: %s", condition, exc)
            return None
