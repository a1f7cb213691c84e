"""Tests for EventBus infrastructure."""

from dataclasses import dataclass

import pytest

from pipegraph.contracts import NodeRunState, RunStateReported
from pipegraph.core.events import EventBus, EventBusProtocol, NullEventBus


@dataclass(frozen=True)
class AnotherEvent:
    """Unrelated event type."""

    count: int


class TestEventBus:
    """Tests for EventBus implementation."""

    def test_subscribe_and_emit(self) -> None:
        bus = EventBus()
        received: list[RunStateReported] = []

        bus.subscribe(RunStateReported, received.append)
        event = RunStateReported(state=NodeRunState(received=1), path="/input")
        bus.emit(event)

        assert received == [event]

    def test_handlers_called_in_subscription_order(self) -> None:
        bus = EventBus()
        calls: list[str] = []

        bus.subscribe(AnotherEvent, lambda e: calls.append("first"))
        bus.subscribe(AnotherEvent, lambda e: calls.append("second"))
        bus.emit(AnotherEvent(count=1))

        assert calls == ["first", "second"]

    def test_only_matching_type_dispatched(self) -> None:
        bus = EventBus()
        received: list[AnotherEvent] = []

        bus.subscribe(AnotherEvent, received.append)
        bus.emit(RunStateReported(state=NodeRunState(), label="x"))

        assert received == []

    def test_emit_without_subscribers(self) -> None:
        EventBus().emit(AnotherEvent(count=0))

    def test_handler_exception_propagates(self) -> None:
        bus = EventBus()

        def failing_handler(event: AnotherEvent) -> None:
            raise RuntimeError("handler failed")

        bus.subscribe(AnotherEvent, failing_handler)

        with pytest.raises(RuntimeError, match="handler failed"):
            bus.emit(AnotherEvent(count=1))


class TestNullEventBus:
    def test_discards_events(self) -> None:
        bus = NullEventBus()
        received: list[AnotherEvent] = []

        bus.subscribe(AnotherEvent, received.append)
        bus.emit(AnotherEvent(count=1))

        assert received == []


class TestEventBusProtocol:
    def test_both_implementations_satisfy_protocol(self) -> None:
        buses: list[EventBusProtocol] = [EventBus(), NullEventBus()]

        for bus in buses:
            bus.subscribe(AnotherEvent, lambda e: None)
            bus.emit(AnotherEvent(count=1))
