from __future__ import annotations

from kbsettings.observable import Observable, SubscriptionScope


def test_subscribe_receives_changes_in_order() -> None:
    source = Observable(1, name="counter")
    seen_a: list[int] = []
    seen_b: list[int] = []
    source.subscribe(seen_a.append)
    source.subscribe(seen_b.append)

    assert source._publish(2) is True
    assert source._publish(3) is True

    assert seen_a == [2, 3]
    assert seen_b == [2, 3]
    assert source.value == 3


def test_publish_same_value_does_not_notify() -> None:
    source = Observable(False)
    seen: list[bool] = []
    source.subscribe(seen.append)

    assert source._publish(False) is False
    assert seen == []


def test_emit_current_delivers_initial_value() -> None:
    source = Observable("a")
    seen: list[str] = []
    source.subscribe(seen.append, emit_current=True)
    assert seen == ["a"]


def test_release_stops_notifications_and_is_idempotent() -> None:
    source = Observable(0)
    seen: list[int] = []
    handle = source.subscribe(seen.append)

    handle.release()
    handle.release()
    source._publish(5)

    assert seen == []
    assert handle.active is False
    assert source.observer_count == 0


def test_subscription_context_manager_releases() -> None:
    source = Observable(0)
    seen: list[int] = []
    with source.subscribe(seen.append):
        source._publish(1)
    source._publish(2)
    assert seen == [1]


def test_observer_may_release_itself_during_notification() -> None:
    source = Observable(0)
    seen: list[int] = []
    handles = []

    def once(value: int) -> None:
        seen.append(value)
        handles[0].release()

    handles.append(source.subscribe(once))
    other: list[int] = []
    source.subscribe(other.append)

    source._publish(1)
    source._publish(2)

    assert seen == [1]
    assert other == [1, 2]


def test_scope_releases_all_owned_subscriptions() -> None:
    first = Observable(0)
    second = Observable(0)
    seen: list[int] = []
    scope = SubscriptionScope()
    scope.add(first.subscribe(seen.append))
    scope.add(second.subscribe(seen.append))
    already_released = scope.add(first.subscribe(seen.append))
    already_released.release()

    assert len(scope) == 3
    assert scope.release_all() == 2
    assert len(scope) == 0

    first._publish(1)
    second._publish(1)
    assert seen == []
    assert first.observer_count == 0
    assert second.observer_count == 0


def test_scope_context_manager() -> None:
    source = Observable(0)
    seen: list[int] = []
    with SubscriptionScope() as scope:
        scope.add(source.subscribe(seen.append))
        source._publish(1)
    source._publish(2)
    assert seen == [1]
