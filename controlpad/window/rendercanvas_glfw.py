"""Rendercanvas/GLFW-backed desktop input window."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

from controlpad.input.keyboard import KeyboardBridge
from controlpad.runtime.logging import setup_logging

logger = logging.getLogger(__name__)

TOUCH_START = "$touchstart"
TOUCH_MOVE = "$touchmove"
TOUCH_END = "$touchend"
TOUCH_LEAVE = "$touchleave"

POINTER_EVENTS = ("pointer_down", "pointer_move", "pointer_up", "pointer_leave")


class EventTarget(Protocol):
    """Anything accepting host-style private events."""

    def trigger(self, event_name: str, *data: Any) -> object: ...


def run_backend_loop(rc_auto: Any) -> None:
    """Run rendercanvas backend loop."""
    loop = getattr(rc_auto, "loop", None)
    if loop is not None and hasattr(loop, "run"):
        loop.run()
        return
    run_func = getattr(rc_auto, "run", None)
    if callable(run_func):
        run_func()
        return
    raise RuntimeError("rendercanvas backend did not expose a runnable loop.")


def stop_backend_loop(rc_auto: Any) -> None:
    """Stop rendercanvas backend loop when supported."""
    loop = getattr(rc_auto, "loop", None)
    if loop is not None and hasattr(loop, "stop"):
        loop.stop()


@dataclass(slots=True)
class InputWindow:
    """Desktop window acting as keyboard source and touch host for controllers."""

    canvas: Any
    keyboard: KeyboardBridge = field(default_factory=KeyboardBridge)
    _rc_module: Any | None = field(default=None, repr=False)
    _touch_target: EventTarget | None = field(default=None, repr=False)
    _touch_active: bool = field(default=False, repr=False)

    def __post_init__(self) -> None:
        self.keyboard.bind(self.canvas)

    def route_pointer_as_touch(self, target: EventTarget) -> None:
        """Forward pointer events to `target` as private touch events.

        A touch lasts from ``pointer_down`` to ``pointer_up``; moves and leaves
        outside of it are hover and are not forwarded.
        """
        first_binding = self._touch_target is None
        self._touch_target = target
        if not first_binding:
            return
        for event_type in POINTER_EVENTS:
            self.canvas.add_event_handler(self._on_pointer, event_type)

    def set_title(self, title: str) -> None:
        setter = getattr(self.canvas, "set_title", None)
        if callable(setter):
            setter(title)

    def run_loop(self) -> None:
        if self._rc_module is None:
            return
        run_backend_loop(self._rc_module)

    def stop_loop(self) -> None:
        if self._rc_module is None:
            return
        stop_backend_loop(self._rc_module)

    def close(self) -> None:
        self.stop_loop()
        closer = getattr(self.canvas, "close", None)
        if callable(closer):
            closer()

    def _on_pointer(self, event: dict[str, Any]) -> None:
        target = self._touch_target
        if target is None:
            return
        event_type = event.get("event_type")
        if event_type == "pointer_down":
            event_name = TOUCH_START
        elif not self._touch_active:
            return
        elif event_type == "pointer_move":
            event_name = TOUCH_MOVE
        elif event_type == "pointer_up":
            event_name = TOUCH_END
        elif event_type == "pointer_leave":
            event_name = TOUCH_LEAVE
        else:
            return
        if event_name in (TOUCH_END, TOUCH_LEAVE):
            self._touch_active = False
        position = self._normalized_position(event)
        if position is None:
            return
        if event_name == TOUCH_START:
            self._touch_active = True
        target.trigger(event_name, {"position": position, "pointer_button": event.get("button", 0)})

    def _normalized_position(self, event: dict[str, Any]) -> dict[str, float] | None:
        x = event.get("x")
        y = event.get("y")
        if not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
            return None
        width, height = _logical_size(self.canvas)
        if width <= 0 or height <= 0:
            return None
        return {
            "x": min(1.0, max(0.0, float(x) / width)),
            "y": min(1.0, max(0.0, float(y) / height)),
        }


def create_input_window(
    canvas: Any | None = None,
    *,
    keyboard: KeyboardBridge | None = None,
    width: int = 640,
    height: int = 480,
    title: str = "controlpad",
) -> InputWindow:
    """Create input window over an existing or newly created GLFW canvas."""
    setup_logging()
    bridge = keyboard if keyboard is not None else KeyboardBridge()
    if canvas is not None:
        return InputWindow(canvas=canvas, keyboard=bridge)
    import rendercanvas.glfw as rc_glfw

    canvas = rc_glfw.RenderCanvas(size=(int(width), int(height)), title=title)
    logger.info(
        "input_window_created",
        extra={"backend": "rendercanvas.glfw", "width": width, "height": height},
    )
    return InputWindow(canvas=canvas, keyboard=bridge, _rc_module=rc_glfw)


def _logical_size(canvas: Any) -> tuple[float, float]:
    getter = getattr(canvas, "get_logical_size", None)
    if not callable(getter):
        return 0.0, 0.0
    width, height = getter()
    return float(width), float(height)
