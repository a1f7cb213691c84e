"""Synchronous event bus between trace pollers and run-state consumers.

Keeps the live-reactivity layer separate from layout: pollers emit
RunStateReported, overlays subscribe. Geometry never subscribes to anything.
"""

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class EventBusProtocol(Protocol):
    """Satisfied by both EventBus and NullEventBus without inheritance."""

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        """Subscribe a handler to an event type."""
        ...

    def emit(self, event: T) -> None:
        """Emit an event to all subscribers."""
        ...


class EventBus:
    """Dispatches events synchronously to subscribers of their exact type.

    Handler exceptions propagate to the emitter.

    Example:
        bus = EventBus()
        overlay = RunStateOverlay(bus)
        bus.emit(RunStateReported(path="/input", state=NodeRunState(received=3)))
    """

    def __init__(self) -> None:
        self._subscribers: dict[type, list[Callable[[Any], None]]] = {}

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        """Subscribe a handler to an event type.

        Args:
            event_type: The event class to subscribe to
            handler: Callable that receives the event instance
        """
        if event_type not in self._subscribers:
            self._subscribers[event_type] = []
        self._subscribers[event_type].append(handler)

    def emit(self, event: T) -> None:
        """Call every handler subscribed to type(event), in subscription order.

        Events with no subscribers are ignored.
        """
        handlers = self._subscribers.get(type(event), [])
        for handler in handlers:
            handler(event)


class NullEventBus:
    """No-op event bus for builds rendered without live run-state."""

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        pass

    def emit(self, event: T) -> None:
        pass
