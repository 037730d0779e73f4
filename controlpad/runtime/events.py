"""Lightweight named event channel used by buttons and controllers."""

from __future__ import annotations

from typing import Any

from controlpad.api.events import EventHandler, Subscription


class RuntimeEventChannel:
    """Simple in-process pub/sub keyed by event name."""

    def __init__(self) -> None:
        self._next_id = 1
        self._handlers: dict[str, dict[int, EventHandler]] = {}

    def subscribe(self, event_name: str, handler: EventHandler) -> Subscription:
        """Subscribe handler for an event name."""
        sub_id = self._next_id
        self._next_id += 1
        self._handlers.setdefault(event_name, {})[sub_id] = handler
        return Subscription(sub_id, event_name)

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription if present."""
        handlers = self._handlers.get(subscription.event_name)
        if handlers is None:
            return
        handlers.pop(subscription.id, None)
        if not handlers:
            del self._handlers[subscription.event_name]

    def emit(self, event_name: str, *payload: Any) -> int:
        """Emit one event and return number of invoked handlers."""
        handlers = self._handlers.get(event_name)
        if not handlers:
            return 0
        # Handlers added while dispatching wait for the next emit.
        snapshot = tuple(handlers.values())
        for handler in snapshot:
            handler(*payload)
        return len(snapshot)

    def handler_count(self, event_name: str) -> int:
        """Return number of handlers currently registered for a name."""
        return len(self._handlers.get(event_name, ()))


EventChannel = RuntimeEventChannel
