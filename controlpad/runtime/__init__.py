"""Controller runtime modules."""

from controlpad.runtime.config import RuntimeConfig, load_runtime_config
from controlpad.runtime.events import EventChannel, RuntimeEventChannel
from controlpad.runtime.button import Button
from controlpad.runtime.controller import Controller
from controlpad.runtime.catalog import (
    ButtonSpec,
    ControllerLayout,
    build_controller,
    get_layout,
    supported_controller_types,
)
from controlpad.runtime.factory import create_controller
from controlpad.runtime.host import LoggingHostBridge, RecordingHostBridge
from controlpad.runtime.logging import setup_logging
from controlpad.runtime.session import ControllerSession, create_controller_session

__all__ = [
    "Button",
    "ButtonSpec",
    "Controller",
    "ControllerLayout",
    "ControllerSession",
    "EventChannel",
    "LoggingHostBridge",
    "RecordingHostBridge",
    "RuntimeConfig",
    "RuntimeEventChannel",
    "build_controller",
    "create_controller",
    "create_controller_session",
    "get_layout",
    "load_runtime_config",
    "setup_logging",
    "supported_controller_types",
]
