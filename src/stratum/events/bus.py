"""Synchronous event bus carrying compilation lifecycle events."""

from __future__ import annotations

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Publish-subscribe hub owned by one compiler.

    Catch-all listeners run before type-specific ones; each group runs in
    subscription order.  Dispatch happens inline on the compiling thread, so
    a listener that raises aborts the compilation that emitted the event.
    """

    def __init__(self) -> None:
        self._by_type: dict[type, list[Listener]] = {}
        self._catch_all: list[Listener] = []

    def subscribe(self, event_type: type, listener: Listener) -> None:
        """Call *listener* for every event of exactly *event_type*."""
        self._by_type.setdefault(event_type, []).append(listener)

    def on_all(self, listener: Listener) -> None:
        """Call *listener* for every event."""
        self._catch_all.append(listener)

    def emit(self, event: Any) -> None:
        for listener in (*self._catch_all, *self._by_type.get(type(event), ())):
            listener(event)
