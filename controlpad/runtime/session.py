"""Controller session: main controller ownership and host event entry point."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from controlpad.api.controller import ControllerOptions, HostBridge, KeyboardSource
from controlpad.api.errors import NoControllerPresent
from controlpad.input.keyboard import KeyboardBridge
from controlpad.runtime.config import enabled_input_trace
from controlpad.runtime.controller import Controller
from controlpad.runtime.factory import create_controller
from controlpad.runtime.host import LoggingHostBridge

logger = logging.getLogger(__name__)


class ControllerSession:
    """Owns the main controller for one host embedding.

    The game calls `request_controller` once at startup; the host bridge then
    pushes ``$keydown`` / ``$keyup`` / ``$touch*`` events through `trigger`.
    Requesting again replaces the main controller and detaches the previous
    one from the keyboard.
    """

    def __init__(
        self,
        host: HostBridge | None = None,
        *,
        keyboard: KeyboardSource | None = None,
        trace: bool | None = None,
    ) -> None:
        self._host: HostBridge = host if host is not None else LoggingHostBridge()
        self._keyboard: KeyboardSource = keyboard if keyboard is not None else KeyboardBridge()
        self._main_controller: Controller | None = None
        self._trace = enabled_input_trace() if trace is None else trace

    @property
    def main_controller(self) -> Controller | None:
        return self._main_controller

    @property
    def keyboard(self) -> KeyboardSource:
        return self._keyboard

    def request_controller(
        self,
        controller_type: str,
        options: ControllerOptions | Mapping[str, object] | None = None,
    ) -> Controller:
        """Build the main controller and announce its type to the host."""
        controller = self._build(controller_type, options)
        self._host.announce_primary_controller_type(controller_type)
        previous = self._main_controller
        if previous is not None:
            previous.disable_keyboard()
            logger.info(
                "controller_main_replaced",
                extra={"controller_type": controller_type, "previous_type": previous.controller_type},
            )
        self._main_controller = controller
        return controller

    def additional_controller(
        self,
        controller_type: str,
        options: ControllerOptions | Mapping[str, object] | None = None,
    ) -> Controller:
        """Build an alternate controller without changing the main one."""
        controller = self._build(controller_type, options)
        self._host.announce_additional_controller_type(controller_type)
        return controller

    def trigger(self, event_name: str, *data: Any) -> int:
        """Forward an event to the main controller."""
        controller = self._main_controller
        if controller is None:
            raise NoControllerPresent()
        invoked = controller.trigger(event_name, *data)
        if self._trace:
            logger.debug("session_trigger", extra={"event": event_name, "handlers": invoked})
        return invoked

    def _build(
        self,
        controller_type: str,
        options: ControllerOptions | Mapping[str, object] | None,
    ) -> Controller:
        return create_controller(
            controller_type,
            options,
            keyboard=self._keyboard,
            trace=self._trace,
        )


def create_controller_session(
    host: HostBridge | None = None,
    *,
    keyboard: KeyboardSource | None = None,
) -> ControllerSession:
    """Create a session bound to a host bridge and keyboard source."""
    return ControllerSession(host, keyboard=keyboard)
