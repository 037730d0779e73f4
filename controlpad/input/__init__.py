"""Physical input sources for controllers."""

from controlpad.api.controller import KeyInputEvent
from controlpad.input.keyboard import KEY_CODES, KeyboardBridge, key_code_for

__all__ = ["KEY_CODES", "KeyInputEvent", "KeyboardBridge", "key_code_for"]
