from __future__ import annotations

import pytest

from controlpad.api.controller import (
    ButtonRemap,
    ControllerOptions,
    KeyInputEvent,
    remap_target_name,
)


def test_coerce_none_yields_defaults() -> None:
    options = ControllerOptions.coerce(None)
    assert options.enable_keyboard is False
    assert dict(options.buttons) == {}


def test_coerce_accepts_host_style_keys() -> None:
    options = ControllerOptions.coerce(
        {"enableKeyboard": 1, "buttons": {"left": {"name": "throttle"}}}
    )
    assert options.enable_keyboard is True
    assert options.buttons == {"left": {"name": "throttle"}}


def test_coerce_prefers_snake_case_key() -> None:
    options = ControllerOptions.coerce({"enable_keyboard": False, "enableKeyboard": True})
    assert options.enable_keyboard is False


def test_coerce_returns_existing_options() -> None:
    options = ControllerOptions(enable_keyboard=True)
    assert ControllerOptions.coerce(options) is options


def test_coerce_rejects_bad_inputs() -> None:
    with pytest.raises(TypeError):
        ControllerOptions.coerce(["enableKeyboard"])  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        ControllerOptions.coerce({"buttons": ["left"]})


def test_remap_target_name_variants() -> None:
    assert remap_target_name("gas") == "gas"
    assert remap_target_name(ButtonRemap("brake")) == "brake"
    assert remap_target_name({"name": "jump"}) == "jump"
    with pytest.raises(ValueError):
        remap_target_name({"label": "jump"})
    with pytest.raises(TypeError):
        remap_target_name(5)  # type: ignore[arg-type]


def test_key_input_event_prevent_default() -> None:
    event = KeyInputEvent(32, " ")
    assert event.default_prevented is False
    event.prevent_default()
    assert event.default_prevented is True
