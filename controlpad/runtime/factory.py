"""Controller construction from catalog type plus options."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from controlpad.api.controller import ControllerOptions, KeyboardSource
from controlpad.input.keyboard import KeyboardBridge
from controlpad.runtime.catalog import build_controller, get_layout
from controlpad.runtime.controller import Controller

logger = logging.getLogger(__name__)


def create_controller(
    controller_type: str,
    options: ControllerOptions | Mapping[str, object] | None = None,
    *,
    keyboard: KeyboardSource | None = None,
    trace: bool | None = None,
) -> Controller:
    """Build a catalog controller and apply keyboard and remap options."""
    layout = get_layout(controller_type)
    resolved = ControllerOptions.coerce(options)
    controller = build_controller(layout, trace=trace)

    if resolved.enable_keyboard:
        if keyboard is None:
            # reachable as controller.keyboard for injection or canvas binding
            keyboard = KeyboardBridge()
        controller.enable_keyboard(keyboard)

    for old_name, descriptor in resolved.buttons.items():
        controller.remap_button(old_name, descriptor)

    logger.debug(
        "controller_created",
        extra={
            "controller_type": layout.identifier,
            "buttons": list(controller.buttons),
            "keyboard": controller.keyboard is not None,
        },
    )
    return controller
