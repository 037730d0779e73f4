from __future__ import annotations

import logging

from controlpad.api.controller import ButtonRemap
from controlpad.input.keyboard import KeyboardBridge
from controlpad.runtime.button import Button
from controlpad.runtime.controller import Controller


def _two_button_controller() -> Controller:
    controller = Controller(controller_type="TwoButtons", trace=False)
    controller.add_button(Button("left", 37))
    controller.add_button(Button("right", 39))
    return controller


def test_private_keydown_reaches_controller_and_button() -> None:
    controller = _two_button_controller()
    controller_events: list[str] = []
    button_events: list[str] = []
    controller.on("keydown", lambda data: controller_events.append(data["button"]))
    controller.buttons["left"].on("keydown", lambda: button_events.append("left"))

    controller.trigger("$keydown", {"button": "left"})

    assert controller_events == ["left"]
    assert button_events == ["left"]


def test_private_keyup_releases_button() -> None:
    controller = _two_button_controller()
    controller.trigger("$keyup", {"button": "right"})
    assert controller.buttons["right"].is_down() is False
    assert controller.buttons["left"].is_down() is True


def test_unknown_or_missing_button_is_dropped() -> None:
    controller = _two_button_controller()
    button_events: list[str] = []
    for name, button in controller.buttons.items():
        button.on("keydown", lambda name=name: button_events.append(name))

    controller.trigger("keydown", {"button": "jump"})
    controller.trigger("keydown", {})
    controller.trigger("keydown", {"button": ""})
    controller.trigger("keydown")
    controller.trigger("$keydown", None)
    controller.trigger("$keydown", "left")

    assert button_events == []


def test_add_button_replaces_same_key() -> None:
    controller = Controller(trace=False)
    first = Button("A", 32)
    second = Button("A", 65)
    controller.add_button(first)
    controller.add_button(second)
    assert controller.buttons == {"A": second}


def test_remap_moves_button_and_aliases_host_name() -> None:
    controller = _two_button_controller()
    left = controller.buttons["left"]
    throttle_events: list[str] = []
    payloads: list[dict[str, str]] = []
    controller.on("keydown", payloads.append)

    controller.remap_button("left", {"name": "throttle"})
    controller.buttons["throttle"].on("keydown", lambda: throttle_events.append("down"))
    controller.trigger("$keydown", {"button": "left"})

    assert "left" not in controller.buttons
    assert controller.buttons["throttle"] is left
    assert controller.button_alias == {"left": "throttle"}
    assert throttle_events == ["down"]
    assert payloads == [{"button": "throttle"}]


def test_remap_accepts_dataclass_and_plain_name() -> None:
    controller = _two_button_controller()
    controller.remap_button("left", ButtonRemap(name="brake"))
    controller.remap_button("right", "gas")
    assert set(controller.buttons) == {"brake", "gas"}


def test_remap_of_absent_button_is_silent_noop() -> None:
    controller = _two_button_controller()
    controller.remap_button("jump", {"name": "hop"})
    assert set(controller.buttons) == {"left", "right"}
    assert controller.button_alias == {}


def test_remap_chain_keeps_original_host_name_routed() -> None:
    controller = _two_button_controller()
    controller.remap_button("left", {"name": "throttle"})
    controller.remap_button("throttle", {"name": "gas"})
    seen: list[str] = []
    controller.buttons["gas"].on("keydown", lambda: seen.append("gas"))

    controller.trigger("$keydown", {"button": "left"})
    controller.trigger("$keydown", {"button": "throttle"})

    assert set(controller.buttons) == {"gas", "right"}
    assert controller.button_alias == {"left": "gas", "throttle": "gas"}
    assert seen == ["gas", "gas"]


def test_public_keydown_with_original_name_after_remap_is_dropped() -> None:
    controller = _two_button_controller()
    controller.remap_button("left", {"name": "throttle"})
    seen: list[str] = []
    controller.buttons["throttle"].on("keydown", lambda: seen.append("throttle"))

    controller.trigger("keydown", {"button": "left"})

    assert seen == []


def test_keyboard_routes_known_key_codes_and_prevents_default() -> None:
    controller = _two_button_controller()
    keyboard = KeyboardBridge()
    controller.enable_keyboard(keyboard)
    payloads: list[tuple[str, str]] = []
    controller.on("keydown", lambda data: payloads.append(("down", data["button"])))
    controller.on("keyup", lambda data: payloads.append(("up", data["button"])))

    pressed = keyboard.press(37)
    released = keyboard.release(39)
    unknown = keyboard.press(90)

    assert payloads == [("down", "left"), ("up", "right")]
    assert pressed.default_prevented is True
    assert released.default_prevented is True
    assert unknown.default_prevented is False
    assert controller.buttons["right"].is_down() is False


def test_keyboard_follows_remapped_names() -> None:
    controller = _two_button_controller()
    keyboard = KeyboardBridge()
    controller.enable_keyboard(keyboard)
    controller.remap_button("left", {"name": "throttle"})
    seen: list[str] = []
    controller.buttons["throttle"].on("keyup", lambda: seen.append("throttle"))

    keyboard.release(37)

    assert seen == ["throttle"]
    assert controller.buttons["throttle"].is_down() is False


def test_keyboard_ignores_buttons_without_key_code() -> None:
    controller = Controller(trace=False)
    controller.add_button(Button("virtual"))
    keyboard = KeyboardBridge()
    controller.enable_keyboard(keyboard)
    seen: list[object] = []
    controller.on("keydown", seen.append)

    event = keyboard.press(0)

    assert seen == []
    assert event.default_prevented is False


def test_relay_reemits_private_touch_events() -> None:
    controller = Controller(relays=("touchstart", "touchmove"), trace=False)
    seen: list[tuple[str, dict[str, object]]] = []
    controller.on("touchstart", lambda data: seen.append(("touchstart", data)))
    controller.on("touchmove", lambda data: seen.append(("touchmove", data)))
    payload = {"position": {"x": 0.25, "y": 0.75}}

    controller.trigger("$touchstart", payload)
    controller.trigger("$touchmove", payload)
    controller.trigger("$touchend", payload)

    assert seen == [("touchstart", payload), ("touchmove", payload)]


def test_disable_keyboard_unsubscribes_both_streams() -> None:
    controller = _two_button_controller()
    keyboard = KeyboardBridge()
    controller.enable_keyboard(keyboard)
    seen: list[str] = []
    controller.on("keydown", lambda data: seen.append(data["button"]))

    controller.disable_keyboard()
    pressed = keyboard.press(37)
    released = keyboard.release(37)
    controller.disable_keyboard()

    assert seen == []
    assert controller.keyboard is None
    assert pressed.default_prevented is False
    assert released.default_prevented is False


def test_enable_keyboard_twice_routes_each_press_once() -> None:
    controller = _two_button_controller()
    first = KeyboardBridge()
    second = KeyboardBridge()
    seen: list[str] = []
    controller.on("keydown", lambda data: seen.append(data["button"]))

    controller.enable_keyboard(first)
    controller.enable_keyboard(second)
    first.press(37)
    second.press(39)
    controller.enable_keyboard(second)
    second.press(37)

    assert seen == ["right", "left"]
    assert controller.keyboard is second


def test_keyboard_trace_record_carries_input_fields(caplog) -> None:
    controller = Controller(controller_type="TwoButtons", trace=True)
    controller.add_button(Button("left", 37))
    keyboard = KeyboardBridge()
    controller.enable_keyboard(keyboard)

    with caplog.at_level(logging.DEBUG, logger="controlpad.runtime.controller"):
        keyboard.press(37)

    records = [r for r in caplog.records if r.getMessage() == "controller_keyboard_event"]
    assert len(records) == 1
    record = records[0]
    assert record.controller_type == "TwoButtons"
    assert record.event == "keydown"
    assert record.button == "left"
    assert record.key_code == 37
