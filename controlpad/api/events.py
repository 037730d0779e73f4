"""Public event channel API contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

EventHandler = Callable[..., None]


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque subscription token."""

    id: int
    event_name: str


class EventChannel(Protocol):
    """Named in-process pub/sub contract."""

    def subscribe(self, event_name: str, handler: EventHandler) -> Subscription:
        """Subscribe handler for event name."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Unsubscribe token."""

    def emit(self, event_name: str, *payload: Any) -> int:
        """Emit event and return invocation count."""


def create_event_channel() -> EventChannel:
    """Create default event channel implementation."""
    from controlpad.runtime.events import RuntimeEventChannel

    return RuntimeEventChannel()
