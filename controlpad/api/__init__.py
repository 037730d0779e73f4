"""Public controlpad API contracts."""

from controlpad.api.controller import (
    ButtonRemap,
    ControllerOptions,
    ControllerType,
    HostBridge,
    KeyboardSource,
    KeyInputEvent,
    KeyInputHandler,
    RemapDescriptor,
    remap_target_name,
)
from controlpad.api.errors import ControllerError, NoControllerPresent, UnsupportedControllerType
from controlpad.api.events import EventChannel, EventHandler, Subscription, create_event_channel
from controlpad.api.logging import LoggingConfig, configure_logging

__all__ = [
    "ButtonRemap",
    "ControllerError",
    "ControllerOptions",
    "ControllerType",
    "EventChannel",
    "EventHandler",
    "HostBridge",
    "KeyInputEvent",
    "KeyInputHandler",
    "KeyboardSource",
    "LoggingConfig",
    "NoControllerPresent",
    "RemapDescriptor",
    "Subscription",
    "UnsupportedControllerType",
    "configure_logging",
    "create_event_channel",
    "remap_target_name",
]
