"""Desktop window adapters."""

from controlpad.window.rendercanvas_glfw import InputWindow, create_input_window

__all__ = ["InputWindow", "create_input_window"]
