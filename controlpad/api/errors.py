"""Controller error taxonomy."""

from __future__ import annotations


class ControllerError(RuntimeError):
    """Base class for controller configuration and routing failures."""


class UnsupportedControllerType(ControllerError, ValueError):
    """Controller type identifier is not present in the catalog."""

    def __init__(self, controller_type: object) -> None:
        super().__init__(f"Unsupported controller type, {controller_type}")
        self.controller_type = controller_type


class NoControllerPresent(ControllerError):
    """Event was triggered before any main controller was requested."""

    def __init__(self) -> None:
        super().__init__("No controller present")
