"""Synchronous event bus for conversion run events."""

from __future__ import annotations

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Dispatch run events to listeners in registration order.

    Type listeners fire after catch-all listeners. With ``record=True`` every
    emitted event is also kept in ``history``, which the CLI uses to build its
    end-of-run summary.
    """

    def __init__(self, *, record: bool = False) -> None:
        self._by_type: dict[type, list[Listener]] = {}
        self._catch_all: list[Listener] = []
        self._record = record
        self._history: list[Any] = []

    def subscribe(self, event_type: type, callback: Listener) -> None:
        self._by_type.setdefault(event_type, []).append(callback)

    def on_all(self, callback: Listener) -> None:
        self._catch_all.append(callback)

    def emit(self, event: Any) -> None:
        if self._record:
            self._history.append(event)
        for cb in self._catch_all:
            cb(event)
        for cb in self._by_type.get(type(event), []):
            cb(event)

    @property
    def history(self) -> list[Any]:
        return list(self._history)

    def of_type(self, event_type: type) -> list[Any]:
        """Recorded events that are instances of *event_type*."""
        return [e for e in self._history if isinstance(e, event_type)]
