"""Observable values and subscription handles.

Observers are plain callables invoked synchronously, in subscription order, on
the thread that commits the change. A ``Subscription`` is the only way to stop
receiving notifications; screens collect theirs in a ``SubscriptionScope`` and
release the whole scope when they unmount.
"""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

from kbsettings.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

Observer = Callable[[T], None]


class Subscription:
    """Handle returned by ``Observable.subscribe``."""

    def __init__(self, source: "Observable[object]", observer: Observer) -> None:
        self._source: Optional[Observable[object]] = source
        self._observer = observer

    @property
    def active(self) -> bool:
        return self._source is not None

    def release(self) -> None:
        """Detach the observer. Releasing twice is a no-op."""
        source = self._source
        if source is None:
            return
        self._source = None
        source._detach(self)

    def _notify(self, value: object) -> None:
        self._observer(value)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc: object) -> None:
        self.release()


class Observable(Generic[T]):
    """A current value plus the observers that want to hear about changes."""

    def __init__(self, value: T, *, name: str = "") -> None:
        self._value = value
        self._name = name
        self._subscriptions: list[Subscription] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> T:
        return self._value

    @property
    def observer_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, observer: Observer, *, emit_current: bool = False) -> Subscription:
        """Register ``observer`` for future changes.

        Args:
            observer: Callable receiving the new value.
            emit_current: Also call ``observer`` once with the current value.

        Returns:
            Handle that detaches the observer when released.
        """
        subscription = Subscription(self, observer)  # type: ignore[arg-type]
        self._subscriptions.append(subscription)
        if emit_current:
            observer(self._value)
        return subscription

    def _publish(self, value: T) -> bool:
        """Store ``value`` and notify observers. Returns False when unchanged."""
        if value == self._value:
            return False
        self._value = value
        logger.debug("Observable %s changed to %r", self._name or "<anonymous>", value)
        # Snapshot so observers may release themselves while being notified.
        for subscription in list(self._subscriptions):
            if subscription.active:
                subscription._notify(value)
        return True

    def _detach(self, subscription: Subscription) -> None:
        try:
            self._subscriptions.remove(subscription)
        except ValueError:
            return


class SubscriptionScope:
    """Owns a group of subscriptions and releases them together."""

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []

    def __len__(self) -> int:
        return len(self._subscriptions)

    def add(self, subscription: Subscription) -> Subscription:
        self._subscriptions.append(subscription)
        return subscription

    def release_all(self) -> int:
        """Release every owned subscription. Returns how many were released."""
        released = 0
        while self._subscriptions:
            subscription = self._subscriptions.pop()
            if subscription.active:
                released += 1
            subscription.release()
        return released

    def __enter__(self) -> "SubscriptionScope":
        return self

    def __exit__(self, *exc: object) -> None:
        self.release_all()
