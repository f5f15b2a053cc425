"""Shared screen mixin for workers, timers and user-facing notifications.

Concrete screens inherit from both a Textual ``Screen`` and this mixin:

    class MyScreen(ManagedScreenMixin, Screen):
        ...

The mixin assumes the host object has ``self.app``, ``self.run_worker`` and
``self.set_interval``.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional

from textual.timer import Timer

from kbsettings.logging import format_exception_summary, get_logger

logger = get_logger(__name__)


class ManagedScreenMixin:
    """Worker, timer and error-reporting helpers for screens."""

    # ------------------------------------------------------------------
    # Workers
    # ------------------------------------------------------------------

    def _start_worker(
        self,
        *,
        work_factory: Callable[[], Awaitable[Any]],
        group: str,
        exclusive: bool,
    ) -> None:
        """Run a coroutine as a Textual worker owned by this screen.

        Args:
            work_factory: Callable that returns the coroutine to run.
            group: Worker group name.
            exclusive: Whether to cancel other workers in ``group`` first.
        """
        run_worker_fn = getattr(self, "run_worker", None)
        if not callable(run_worker_fn):
            logger.debug("Host cannot run workers; skipping %s", group)
            return
        run_worker_fn(work_factory(), group=group, exclusive=exclusive)

    # ------------------------------------------------------------------
    # Timers
    # ------------------------------------------------------------------

    def _start_timer(
        self,
        *,
        interval_seconds: float,
        callback: Callable[[], Any],
    ) -> Optional[Timer]:
        """Start a periodic timer.

        Args:
            interval_seconds: Interval between callbacks.
            callback: Timer callback.

        Returns:
            Timer object or None when the host cannot schedule timers.
        """
        set_interval_fn = getattr(self, "set_interval", None)
        if not callable(set_interval_fn):
            return None
        return set_interval_fn(interval_seconds, callback)

    def _stop_timer(self, timer: Optional[Timer]) -> None:
        if timer is None:
            return
        timer.stop()

    def _pause_timer(self, timer: Optional[Timer]) -> None:
        if timer is not None:
            timer.pause()

    def _resume_timer(self, timer: Optional[Timer]) -> None:
        if timer is not None:
            timer.resume()

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def _notify_event(
        self,
        message: str,
        *,
        severity: str = "information",
        timeout: Optional[float] = None,
    ) -> None:
        """Forward a toast to the app when it supports ``notify``."""
        notify = getattr(getattr(self, "app", None), "notify", None)
        if not callable(notify):
            logger.info(message)
            return
        kwargs: dict[str, Any] = {"severity": severity}
        if timeout is not None:
            kwargs["timeout"] = timeout
        notify(message, **kwargs)

    def _run_action(self, label: str, action: Callable[[], Any]) -> Any:
        """Run a user-triggered action, reporting failures instead of raising.

        Returns:
            The action's result, or None when it failed.
        """
        try:
            return action()
        except Exception as exc:
            logger.exception("Screen action '%s' failed", label)
            self._notify_event(
                f"{label} failed: {format_exception_summary(exc)}",
                severity="error",
            )
            return None

    async def _run_action_async(
        self,
        label: str,
        action: Callable[[], Awaitable[Any]],
    ) -> Any:
        """Await ``action`` with the same failure reporting as ``_run_action``."""
        try:
            return await action()
        except Exception as exc:
            logger.exception("Screen action '%s' failed", label)
            self._notify_event(
                f"{label} failed: {format_exception_summary(exc)}",
                severity="error",
            )
            return None
