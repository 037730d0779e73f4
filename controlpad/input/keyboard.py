"""Physical keyboard bridge feeding controllers with key codes."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from controlpad.api.controller import KeyInputEvent, KeyInputHandler
from controlpad.api.events import Subscription
from controlpad.runtime.config import enabled_input_trace
from controlpad.runtime.events import RuntimeEventChannel

logger = logging.getLogger(__name__)

KEY_PRESS = "key_press"
KEY_RELEASE = "key_release"

KEY_CODES: dict[str, int] = {
    "Backspace": 8,
    "Tab": 9,
    "Enter": 13,
    "Shift": 16,
    "Control": 17,
    "Alt": 18,
    "Escape": 27,
    " ": 32,
    "Space": 32,
    "ArrowLeft": 37,
    "ArrowUp": 38,
    "ArrowRight": 39,
    "ArrowDown": 40,
    **{str(digit): 48 + digit for digit in range(10)},
    **{chr(ord("A") + offset): 65 + offset for offset in range(26)},
}


def key_code_for(key: str) -> int | None:
    """Translate a canvas key name to its DOM key code."""
    code = KEY_CODES.get(key)
    if code is None and len(key) == 1:
        code = KEY_CODES.get(key.upper())
    return code


class KeyboardBridge:
    """Re-publish physical key presses/releases as `KeyInputEvent` streams."""

    def __init__(self) -> None:
        self._channel = RuntimeEventChannel()
        self._debug = enabled_input_trace()

    def on_key_press(self, handler: KeyInputHandler) -> Subscription:
        """Subscribe to physical key presses."""
        return self._channel.subscribe(KEY_PRESS, handler)

    def on_key_release(self, handler: KeyInputHandler) -> Subscription:
        """Subscribe to physical key releases."""
        return self._channel.subscribe(KEY_RELEASE, handler)

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a press or release subscription."""
        self._channel.unsubscribe(subscription)

    def press(self, key_code: int, key: str = "") -> KeyInputEvent:
        """Inject one key press and return the dispatched event."""
        return self._dispatch(KEY_PRESS, KeyInputEvent(int(key_code), key))

    def release(self, key_code: int, key: str = "") -> KeyInputEvent:
        """Inject one key release and return the dispatched event."""
        return self._dispatch(KEY_RELEASE, KeyInputEvent(int(key_code), key))

    def bind(self, canvas: Any) -> None:
        """Attach key listeners to a rendercanvas canvas."""
        if not hasattr(canvas, "add_event_handler"):
            raise RuntimeError("Canvas does not support event handlers.")
        canvas.add_event_handler(self._on_key_down, "key_down")
        canvas.add_event_handler(self._on_key_up, "key_up")

    def _on_key_down(self, event: dict[str, Any]) -> None:
        if event.get("event_type") != "key_down":
            return
        self._forward_canvas_event(KEY_PRESS, event)

    def _on_key_up(self, event: dict[str, Any]) -> None:
        if event.get("event_type") != "key_up":
            return
        self._forward_canvas_event(KEY_RELEASE, event)

    def _forward_canvas_event(self, stream: str, event: dict[str, Any]) -> None:
        key = event.get("key")
        if not isinstance(key, str):
            return
        key_code = key_code_for(key)
        if key_code is None:
            if self._debug:
                logger.debug("keyboard_key_unmapped", extra={"key": key})
            return
        dispatched = self._dispatch(stream, KeyInputEvent(key_code, key))
        if dispatched.default_prevented and isinstance(event, MutableMapping):
            event["default_prevented"] = True

    def _dispatch(self, stream: str, event: KeyInputEvent) -> KeyInputEvent:
        invoked = self._channel.emit(stream, event)
        if self._debug:
            logger.debug(
                "keyboard_event",
                extra={
                    "event": stream,
                    "key_code": event.key_code,
                    "key": event.key,
                    "handlers": invoked,
                    "prevented": event.default_prevented,
                },
            )
        return event
