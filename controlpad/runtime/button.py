"""Single two-state controller button."""

from __future__ import annotations

from typing import Any

from controlpad.api.events import EventHandler, Subscription
from controlpad.runtime.events import RuntimeEventChannel


class Button:
    """Named button tracking press state from its own keydown/keyup events.

    Games subscribe with ``on("keydown", ...)`` / ``on("keyup", ...)``; both
    events fire without payload. A new button reads as pressed until its first
    ``keyup``.
    """

    __slots__ = ("_key", "_key_code", "_pressed", "_channel")

    def __init__(self, key: str, key_code: int | None = None) -> None:
        self._key = key
        self._key_code = key_code
        self._pressed = True
        self._channel = RuntimeEventChannel()
        self._channel.subscribe("keydown", self._on_keydown)
        self._channel.subscribe("keyup", self._on_keyup)

    @property
    def key(self) -> str:
        return self._key

    @property
    def key_code(self) -> int | None:
        return self._key_code

    def is_down(self) -> bool:
        """Return True while the button is pressed."""
        return self._pressed

    def on(self, event_name: str, handler: EventHandler) -> Subscription:
        """Subscribe handler for a button event."""
        return self._channel.subscribe(event_name, handler)

    def off(self, subscription: Subscription) -> None:
        """Remove a handler registered with `on`."""
        self._channel.unsubscribe(subscription)

    def trigger(self, event_name: str, *data: Any) -> int:
        """Emit a button event and return number of invoked handlers."""
        return self._channel.emit(event_name, *data)

    def _on_keydown(self, *_: Any) -> None:
        self._pressed = True

    def _on_keyup(self, *_: Any) -> None:
        self._pressed = False

    def __repr__(self) -> str:
        return f"Button(key={self._key!r}, key_code={self._key_code!r}, pressed={self._pressed})"
