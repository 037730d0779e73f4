"""Controller and button event model for games embedded in a host application."""

from controlpad.api.controller import ButtonRemap, ControllerOptions, ControllerType
from controlpad.api.errors import ControllerError, NoControllerPresent, UnsupportedControllerType
from controlpad.runtime.button import Button
from controlpad.runtime.controller import Controller
from controlpad.runtime.session import ControllerSession, create_controller_session

__all__ = [
    "Button",
    "ButtonRemap",
    "Controller",
    "ControllerError",
    "ControllerOptions",
    "ControllerSession",
    "ControllerType",
    "NoControllerPresent",
    "UnsupportedControllerType",
    "create_controller_session",
]
