"""Public controller API contracts."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Protocol, TypeAlias

from controlpad.api.events import Subscription


class ControllerType:
    """Catalog identifiers understood by the host."""

    ONE_BUTTON = "OneButton"
    TWO_BUTTONS = "TwoButtons"
    FOUR_BUTTONS = "FourButtons"
    FIVE_BUTTONS = "FiveButtons"
    SIX_BUTTONS = "SixButtons"
    TOUCH = "Touch"


@dataclass(frozen=True, slots=True)
class ButtonRemap:
    """New name for a remapped button."""

    name: str


RemapDescriptor: TypeAlias = ButtonRemap | Mapping[str, str] | str


def remap_target_name(descriptor: RemapDescriptor) -> str:
    """Return the new button name carried by a remap descriptor."""
    if isinstance(descriptor, str):
        name = descriptor
    elif isinstance(descriptor, ButtonRemap):
        name = descriptor.name
    elif isinstance(descriptor, Mapping):
        name = descriptor.get("name", "")
    else:
        raise TypeError(f"Unsupported remap descriptor: {descriptor!r}")
    if not isinstance(name, str) or not name:
        raise ValueError(f"Remap descriptor must provide a button name: {descriptor!r}")
    return name


@dataclass(frozen=True, slots=True)
class ControllerOptions:
    """Options applied to a freshly built controller."""

    enable_keyboard: bool = False
    buttons: Mapping[str, RemapDescriptor] = field(default_factory=dict)

    @classmethod
    def coerce(cls, raw: ControllerOptions | Mapping[str, object] | None) -> ControllerOptions:
        """Normalize `None`, options or a host-style mapping into options."""
        if raw is None:
            return cls()
        if isinstance(raw, ControllerOptions):
            return raw
        if not isinstance(raw, Mapping):
            raise TypeError(f"Unsupported controller options: {raw!r}")
        enable_keyboard = raw.get("enable_keyboard", raw.get("enableKeyboard", False))
        buttons = raw.get("buttons") or {}
        if not isinstance(buttons, Mapping):
            raise TypeError("Controller option 'buttons' must be a mapping.")
        return cls(enable_keyboard=bool(enable_keyboard), buttons=dict(buttons))


@dataclass(slots=True)
class KeyInputEvent:
    """Physical key press or release delivered by a keyboard source."""

    key_code: int
    key: str = ""
    default_prevented: bool = False

    def prevent_default(self) -> None:
        """Suppress default host handling of this key."""
        self.default_prevented = True


KeyInputHandler = Callable[[KeyInputEvent], None]


class KeyboardSource(Protocol):
    """Physical keyboard subscription points consumed by controllers."""

    def on_key_press(self, handler: KeyInputHandler) -> Subscription:
        """Subscribe to key presses."""

    def on_key_release(self, handler: KeyInputHandler) -> Subscription:
        """Subscribe to key releases."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a press or release subscription."""


class HostBridge(Protocol):
    """Outbound controller-type announcements to the embedding host."""

    def announce_primary_controller_type(self, controller_type: str) -> None:
        """Announce the controller type the game primarily uses."""

    def announce_additional_controller_type(self, controller_type: str) -> None:
        """Announce an alternate controller type."""
