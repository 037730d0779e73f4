"""Controller: named buttons fed by host and keyboard events."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any

from controlpad.api.controller import KeyboardSource, KeyInputEvent, RemapDescriptor, remap_target_name
from controlpad.api.events import EventHandler, Subscription
from controlpad.runtime.button import Button
from controlpad.runtime.config import enabled_input_trace
from controlpad.runtime.events import RuntimeEventChannel

logger = logging.getLogger(__name__)

PRIVATE_PREFIX = "$"


class Controller:
    """Collection of buttons that routes controller events to them.

    Host events arrive as private ``$keydown`` / ``$keyup`` with a
    ``{"button": name}`` payload. Aliases from `remap_button` are applied and
    the event is re-emitted publicly as ``keydown`` / ``keyup``, which in turn
    triggers the named button. Games may listen on the controller for every
    button or on a single button::

        controller.on("keydown", lambda data: print(data["button"]))
        controller.buttons["left"].on("keydown", lambda: print("left"))
    """

    def __init__(
        self,
        *,
        controller_type: str | None = None,
        relays: Iterable[str] = (),
        trace: bool | None = None,
    ) -> None:
        self.controller_type = controller_type
        self.buttons: dict[str, Button] = {}
        self.button_alias: dict[str, str] = {}
        self.keyboard: KeyboardSource | None = None
        self._keyboard_subscriptions: list[Subscription] = []
        self._channel = RuntimeEventChannel()
        self._trace = enabled_input_trace() if trace is None else trace

        self.on(f"{PRIVATE_PREFIX}keydown", lambda *data: self._on_private_key("keydown", *data))
        self.on(f"{PRIVATE_PREFIX}keyup", lambda *data: self._on_private_key("keyup", *data))
        self.on("keydown", lambda *data: self._on_public_key("keydown", *data))
        self.on("keyup", lambda *data: self._on_public_key("keyup", *data))
        for event_name in relays:
            self._install_relay(event_name)

    def on(self, event_name: str, handler: EventHandler) -> Subscription:
        """Subscribe handler for a controller event."""
        return self._channel.subscribe(event_name, handler)

    def off(self, subscription: Subscription) -> None:
        """Remove a handler registered with `on`."""
        self._channel.unsubscribe(subscription)

    def trigger(self, event_name: str, *data: Any) -> int:
        """Emit a controller event and return number of invoked handlers."""
        return self._channel.emit(event_name, *data)

    def add_button(self, button: Button) -> None:
        """Store button under its key, replacing any button with the same key."""
        if button.key in self.buttons:
            logger.debug(
                "controller_button_replaced",
                extra={"controller_type": self.controller_type, "button": button.key},
            )
        self.buttons[button.key] = button

    def enable_keyboard(self, keyboard: KeyboardSource) -> None:
        """Route physical key presses of known key codes to button events.

        A controller follows one keyboard at a time; enabling again first drops
        the previous subscriptions.
        """
        self.disable_keyboard()
        key_codes: dict[int, Button] = {}
        for button in self.buttons.values():
            if button.key_code is not None:
                key_codes[button.key_code] = button

        def on_press(event: KeyInputEvent) -> None:
            self._on_keyboard(key_codes, event, "keydown")

        def on_release(event: KeyInputEvent) -> None:
            self._on_keyboard(key_codes, event, "keyup")

        self.keyboard = keyboard
        self._keyboard_subscriptions = [
            keyboard.on_key_press(on_press),
            keyboard.on_key_release(on_release),
        ]
        logger.debug(
            "controller_keyboard_enabled",
            extra={"controller_type": self.controller_type, "key_codes": sorted(key_codes)},
        )

    def disable_keyboard(self) -> None:
        """Stop following the keyboard passed to `enable_keyboard`."""
        keyboard = self.keyboard
        if keyboard is None:
            return
        for subscription in self._keyboard_subscriptions:
            keyboard.unsubscribe(subscription)
        self._keyboard_subscriptions = []
        self.keyboard = None
        logger.debug("controller_keyboard_disabled", extra={"controller_type": self.controller_type})

    def remap_button(self, old_name: str, new_descriptor: RemapDescriptor) -> None:
        """Rename a button; host events naming the old name keep reaching it."""
        new_name = remap_target_name(new_descriptor)
        button = self.buttons.get(old_name)
        if button is None:
            return
        for original, target in self.button_alias.items():
            if target == old_name:
                self.button_alias[original] = new_name
        self.button_alias[old_name] = new_name
        self.buttons[new_name] = button
        if new_name != old_name:
            del self.buttons[old_name]

    def _install_relay(self, event_name: str) -> None:
        def relay(*data: Any) -> None:
            self.trigger(event_name, *data)

        self.on(f"{PRIVATE_PREFIX}{event_name}", relay)

    def _on_private_key(self, event_name: str, data: Any = None, *extra: Any) -> None:
        if isinstance(data, MutableMapping):
            name = data.get("button")
            if isinstance(name, str) and name in self.button_alias:
                data["button"] = self.button_alias[name]
        self.trigger(event_name, data, *extra)

    def _on_public_key(self, event_name: str, data: Any = None, *_: Any) -> None:
        name = data.get("button") if isinstance(data, Mapping) else None
        button = self.buttons.get(name) if isinstance(name, str) and name else None
        if button is None:
            if self._trace:
                logger.debug(
                    "controller_event_dropped",
                    extra={
                        "controller_type": self.controller_type,
                        "event": event_name,
                        "button": name,
                    },
                )
            return
        button.trigger(event_name)

    def _on_keyboard(self, key_codes: dict[int, Button], event: KeyInputEvent, event_name: str) -> None:
        button = key_codes.get(event.key_code)
        if button is None:
            return
        event.prevent_default()
        name = self.button_alias.get(button.key, button.key)
        if self._trace:
            logger.debug(
                "controller_keyboard_event",
                extra={
                    "controller_type": self.controller_type,
                    "event": event_name,
                    "button": name,
                    "key_code": event.key_code,
                },
            )
        self.trigger(event_name, {"button": name})

    def __repr__(self) -> str:
        return f"Controller(type={self.controller_type!r}, buttons={list(self.buttons)!r})"
