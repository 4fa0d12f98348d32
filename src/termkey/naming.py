from evdev import ecodes

from .lib.logger import debug
from .models.button import Button
from .models.key import Key

UNKNOWN_KEY = "UNKNOWN"
UNKNOWN_BUTTON = "UNKNOWN BUTTON"
SEPARATOR = " + "

# Names shown for keys whose input event name doesn't read well on its
# own. Everything else falls back to the evdev name minus its prefix.
KEY_NAMES = {
    # Modifiers
    Key.LEFT_SHIFT:     "SHIFT_L",
    Key.RIGHT_SHIFT:    "SHIFT_R",
    Key.LEFT_CTRL:      "CONTROL_L",
    Key.RIGHT_CTRL:     "CONTROL_R",
    Key.LEFT_ALT:       "ALT_L",
    Key.RIGHT_ALT:      "ALT_R",
    Key.LEFT_META:      "META_L",
    Key.RIGHT_META:     "META_R",
    Key.ALTGR:          "ALTGR",
    Key.LEFT_SUPER:     "SUPER_L",
    Key.RIGHT_SUPER:    "SUPER_R",

    # Punctuation, with the glyph it types
    Key.APOSTROPHE:     "APOSTROPHE (')",
    Key.GRAVE:          "GRAVE (`)",
    Key.SLASH:          "SLASH (/)",
    Key.BACKSLASH:      "BACKSLASH (\\)",
    Key.LEFT_BRACE:     "BRACKETLEFT ([)",
    Key.RIGHT_BRACE:    "BRACKETRIGHT (])",
    Key.COMMA:          "COMMA (,)",
    Key.DOT:            "PERIOD (.)",
    Key.MINUS:          "MINUS (-)",
    Key.EQUAL:          "EQUAL (=)",
    Key.SEMICOLON:      "SEMICOLON (;)",

    # Keypad operators
    Key.KPSLASH:        "KP_DIVIDE (/)",
    Key.KPASTERISK:     "KP_MULTIPLY (*)",
    Key.KPMINUS:        "KP_SUBTRACT (-)",
    Key.KPPLUS:         "KP_ADD (+)",
    Key.KPDOT:          "KP_DECIMAL (.)",
    Key.KPENTER:        "KP_ENTER",

    # Navigation
    Key.LEFT:           "ARROW LEFT",
    Key.RIGHT:          "ARROW RIGHT",
    Key.UP:             "ARROW UP",
    Key.DOWN:           "ARROW DOWN",
    Key.PAGE_UP:        "PAGE UP",
    Key.PAGE_DOWN:      "PAGE DOWN",
    Key.HOME:           "HOME",
    Key.END:            "END",

    # Locks and the odd ones out
    Key.ESC:            "ESCAPE",
    Key.CAPSLOCK:       "CAPS LOCK",
    Key.NUMLOCK:        "NUM LOCK",
    Key.SCROLLLOCK:     "SCROLL LOCK",
    Key.SYSRQ:          "PRINT SCREEN",
}

BUTTON_NAMES = {
    Button.LEFT:        "LEFT CLICK",
    Button.MIDDLE:      "MIDDLE CLICK",
    Button.RIGHT:       "RIGHT CLICK",
    Button.WHEEL_UP:    "WHEEL UP",
    Button.WHEEL_DOWN:  "WHEEL DOWN",
}

_EVDEV_PREFIXES = ("KEY_", "BTN_")
_RANGE_MARKERS = ("KEY_MIN_INTERESTING", "BTN_MISC", "BTN_MOUSE",
                  "BTN_JOYSTICK", "BTN_GAMEPAD", "BTN_DIGI", "BTN_WHEEL")


def _platform_key_name(code):
    """
    The input subsystem's own symbolic name for a key code, or None.

    Codes shared by several names come back from evdev as a list. Range
    markers like KEY_MIN_INTERESTING are skipped in favor of a real name.
    """
    names = ecodes.keys.get(code)
    if not names:
        return None
    if isinstance(names, (list, tuple)):
        names = [n for n in names if n not in _RANGE_MARKERS] or names
        names = names[0]
    for prefix in _EVDEV_PREFIXES:
        if names.startswith(prefix):
            return names[len(prefix):]
    return names


def name_for_key(key):
    """Display name for a key code. Never fails."""
    try:
        return KEY_NAMES[key]
    except (KeyError, TypeError):
        pass

    name = None
    if isinstance(key, int):
        name = _platform_key_name(key)
    if not name:
        debug(f"No name for key code {key!r}")
        return UNKNOWN_KEY
    return name.upper()


def name_for_button(button):
    try:
        return BUTTON_NAMES[button]
    except (KeyError, TypeError):
        pass
    if isinstance(button, int) and button > Button.WHEEL_DOWN:
        return f"CLICK BUTTON {int(button)}"
    return UNKNOWN_BUTTON


def join_buttons(buttons):
    return SEPARATOR.join(name_for_button(button) for button in buttons)
