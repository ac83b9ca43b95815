"""Synchronous event bus connecting edit sessions to their host."""

from __future__ import annotations

from collections import defaultdict
from typing import Callable

from boxplay.events.types import SessionEvent

Listener = Callable[[SessionEvent], None]


class EventBus:
    """Publish-subscribe hub for session events.

    Hosts subscribe per event type, or to everything with ``on_all``, and
    redraw the part of the view an event touches. Catch-all listeners run
    first, then typed ones, each group in registration order.
    """

    def __init__(self) -> None:
        self._by_type: defaultdict[type, list[Listener]] = defaultdict(list)
        self._catch_all: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> None:
        self._by_type[event_type].append(callback)

    def unsubscribe(self, event_type: type, callback: Listener) -> None:
        """Drop *callback* for *event_type*; unknown callbacks are ignored."""
        if callback in self._by_type.get(event_type, ()):
            self._by_type[event_type].remove(callback)

    def on_all(self, callback: Listener) -> None:
        self._catch_all.append(callback)

    def emit(self, event: SessionEvent) -> None:
        listeners = self._catch_all + self._by_type.get(type(event), [])
        for listener in listeners:
            listener(event)
