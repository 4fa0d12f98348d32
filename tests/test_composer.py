from termkey.composer import Composer
from termkey.config_api import reset_configuration
from termkey.models.button import Button
from termkey.models.key import Key
from termkey.tracker import Tracker

_tracker = None
_composer = None


def setup_function(module):
    global _tracker, _composer
    reset_configuration()
    _tracker = Tracker()
    _composer = Composer(_tracker)


def hold(key):
    _tracker.on_key_event(key, True)


def lift(key):
    _tracker.on_key_event(key, False)


def test_plain_key():
    assert "A" == _composer.compose_key(Key.A)

def test_lone_modifier():
    hold(Key.LEFT_CTRL)
    assert "CONTROL_L" == _composer.compose_key(Key.LEFT_CTRL)

def test_chord():
    hold(Key.LEFT_CTRL)
    assert "CONTROL_L + A" == _composer.compose_key(Key.A)

def test_released_modifier_does_not_linger():
    hold(Key.LEFT_CTRL)
    lift(Key.LEFT_CTRL)
    assert "A" == _composer.compose_key(Key.A)

def test_modifier_pressed_while_another_is_held():
    hold(Key.LEFT_CTRL)
    hold(Key.LEFT_SHIFT)
    assert "CONTROL_L + SHIFT_L" == _composer.compose_key(Key.LEFT_SHIFT)

def test_modifier_order_is_fixed():
    hold(Key.LEFT_SHIFT)
    hold(Key.RIGHT_ALT)
    hold(Key.LEFT_CTRL)
    assert "CONTROL_L + ALT_R + SHIFT_L + T" == _composer.compose_key(Key.T)

def test_glyph_names_in_chord():
    hold(Key.RIGHT_SHIFT)
    assert "SHIFT_R + APOSTROPHE (')" == _composer.compose_key(Key.APOSTROPHE)

def test_unknown_key():
    assert "UNKNOWN" == _composer.compose_key(0xfffff)

def test_unknown_key_with_modifier():
    hold(Key.LEFT_ALT)
    assert "ALT_L + UNKNOWN" == _composer.compose_key(0xfffff)

def test_held_button_prefixes_key():
    _tracker.on_button_event(Button.LEFT, True)
    hold(Key.LEFT_CTRL)
    assert "LEFT CLICK + CONTROL_L + C" == _composer.compose_key(Key.C)
    assert "LEFT CLICK + CONTROL_L" == _composer.compose_key(Key.LEFT_CTRL)

def test_button_label():
    _tracker.on_button_event(2, True)
    _tracker.on_button_event(3, True)
    assert "MIDDLE CLICK + RIGHT CLICK" == _composer.compose_buttons()

def test_extended_buttons():
    _tracker.on_button_event(1, True)
    _tracker.on_button_event(12, True)
    assert "LEFT CLICK + CLICK BUTTON 12" == _composer.compose_buttons()

def test_wheel_alone():
    assert "WHEEL UP" == _composer.compose_transient(Button.WHEEL_UP)

def test_wheel_joins_held_buttons_without_sticking():
    _tracker.on_button_event(3, True)
    assert "RIGHT CLICK + WHEEL DOWN" == _composer.compose_transient(Button.WHEEL_DOWN)
    assert [3] == _tracker.active_buttons()

def test_composing_does_not_mutate_tracker():
    hold(Key.LEFT_CTRL)
    before = _tracker.state
    _composer.compose_key(Key.A)
    _composer.compose_key(Key.LEFT_CTRL)
    _composer.compose_buttons()
    assert before == _tracker.state

def test_untrackable_button_rides_along():
    _tracker.on_button_event(1, True)
    assert "LEFT CLICK + UNKNOWN BUTTON" == _composer.compose_transient(0)
    assert [1] == _tracker.active_buttons()
