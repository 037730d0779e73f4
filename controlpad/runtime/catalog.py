"""Fixed controller layouts keyed by host controller type."""

from __future__ import annotations

from dataclasses import dataclass

from controlpad.api.controller import ControllerType
from controlpad.api.errors import UnsupportedControllerType
from controlpad.runtime.button import Button
from controlpad.runtime.controller import Controller

# DOM key codes used by the keyboard bridge.
KEY_SPACE = 32
KEY_LEFT = 37
KEY_UP = 38
KEY_RIGHT = 39
KEY_DOWN = 40
KEY_CTRL = 17

TOUCH_EVENTS: tuple[str, ...] = (
    "touchstart",
    "touchend",
    "touchmove",
    "touchleave",
    "touchcancel",
)


@dataclass(frozen=True, slots=True)
class ButtonSpec:
    """Button name and keyboard key code of one layout slot."""

    name: str
    key_code: int | None


@dataclass(frozen=True, slots=True)
class ControllerLayout:
    """Buttons and relayed private events of one controller type."""

    identifier: str
    buttons: tuple[ButtonSpec, ...] = ()
    relays: tuple[str, ...] = ()

    @property
    def button_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.buttons)


_LAYOUTS: dict[str, ControllerLayout] = {
    layout.identifier: layout
    for layout in (
        ControllerLayout(
            ControllerType.ONE_BUTTON,
            (ButtonSpec("button", KEY_SPACE),),
        ),
        ControllerLayout(
            ControllerType.TWO_BUTTONS,
            (ButtonSpec("left", KEY_LEFT), ButtonSpec("right", KEY_RIGHT)),
        ),
        ControllerLayout(
            ControllerType.FOUR_BUTTONS,
            (
                ButtonSpec("up", KEY_UP),
                ButtonSpec("left", KEY_LEFT),
                ButtonSpec("right", KEY_RIGHT),
                ButtonSpec("A", KEY_SPACE),
            ),
        ),
        ControllerLayout(
            ControllerType.FIVE_BUTTONS,
            (
                ButtonSpec("up", KEY_UP),
                ButtonSpec("left", KEY_LEFT),
                ButtonSpec("right", KEY_RIGHT),
                ButtonSpec("down", KEY_DOWN),
                ButtonSpec("A", KEY_SPACE),
            ),
        ),
        ControllerLayout(
            ControllerType.SIX_BUTTONS,
            (
                ButtonSpec("up", KEY_UP),
                ButtonSpec("left", KEY_LEFT),
                ButtonSpec("right", KEY_RIGHT),
                ButtonSpec("down", KEY_DOWN),
                ButtonSpec("A", KEY_SPACE),
                ButtonSpec("B", KEY_CTRL),
            ),
        ),
        ControllerLayout(ControllerType.TOUCH, relays=TOUCH_EVENTS),
    )
}


def supported_controller_types() -> tuple[str, ...]:
    """Return catalog identifiers in declaration order."""
    return tuple(_LAYOUTS)


def get_layout(controller_type: str) -> ControllerLayout:
    """Return layout for a controller type or raise UnsupportedControllerType."""
    layout = _LAYOUTS.get(controller_type) if isinstance(controller_type, str) else None
    if layout is None:
        raise UnsupportedControllerType(controller_type)
    return layout


def build_controller(layout: ControllerLayout, *, trace: bool | None = None) -> Controller:
    """Construct a controller pre-populated with the layout's buttons."""
    controller = Controller(controller_type=layout.identifier, relays=layout.relays, trace=trace)
    for spec in layout.buttons:
        controller.add_button(Button(spec.name, spec.key_code))
    return controller
