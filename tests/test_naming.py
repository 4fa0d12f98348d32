from evdev import ecodes

from termkey.models.button import Button
from termkey.models.key import Key
from termkey.naming import (UNKNOWN_BUTTON, UNKNOWN_KEY, join_buttons,
                            name_for_button, name_for_key)


def test_modifier_names():
    assert "CONTROL_L" == name_for_key(Key.LEFT_CTRL)
    assert "SHIFT_R" == name_for_key(Key.RIGHT_SHIFT)
    assert "ALTGR" == name_for_key(Key.ALTGR)
    assert "SUPER_L" == name_for_key(Key.LEFT_SUPER)

def test_punctuation_carries_glyph():
    assert "APOSTROPHE (')" == name_for_key(Key.APOSTROPHE)
    assert "BACKSLASH (\\)" == name_for_key(Key.BACKSLASH)
    assert "KP_ADD (+)" == name_for_key(Key.KPPLUS)

def test_navigation_names():
    assert "ARROW LEFT" == name_for_key(Key.LEFT)
    assert "PAGE DOWN" == name_for_key(Key.PAGE_DOWN)

def test_falls_back_to_platform_name():
    assert "A" == name_for_key(Key.A)
    assert "F5" == name_for_key(Key.F5)
    assert "1" == name_for_key(Key.KEY_1)
    assert "SPACE" == name_for_key(Key.SPACE)

def test_plain_int_codes_work_too():
    assert "A" == name_for_key(ecodes.KEY_A)
    assert "CONTROL_L" == name_for_key(ecodes.KEY_LEFTCTRL)
    assert "F13" == name_for_key(ecodes.KEY_F13)

def test_unknown_key_code():
    assert UNKNOWN_KEY == name_for_key(0xfffff)
    assert UNKNOWN_KEY == name_for_key(-1)
    assert UNKNOWN_KEY == name_for_key(None)

def test_button_names():
    assert "LEFT CLICK" == name_for_button(Button.LEFT)
    assert "MIDDLE CLICK" == name_for_button(2)
    assert "RIGHT CLICK" == name_for_button(3)
    assert "WHEEL UP" == name_for_button(4)
    assert "WHEEL DOWN" == name_for_button(5)

def test_extended_button_names():
    assert "CLICK BUTTON 6" == name_for_button(6)
    assert "CLICK BUTTON 15" == name_for_button(15)

def test_unknown_button():
    assert UNKNOWN_BUTTON == name_for_button(0)
    assert UNKNOWN_BUTTON == name_for_button(-3)
    assert UNKNOWN_BUTTON == name_for_button("left")

def test_join_buttons():
    assert "" == join_buttons([])
    assert "LEFT CLICK" == join_buttons([1])
    assert "MIDDLE CLICK + RIGHT CLICK" == join_buttons([2, 3])
    assert "LEFT CLICK + CLICK BUTTON 9" == join_buttons([1, 9])
