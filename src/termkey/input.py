from typing import Optional

from evdev import InputEvent, ecodes

from .lib.logger import debug
from .models.button import Button
from .models.key import Key
from .models.event import (BUTTON_PRESS, BUTTON_RELEASE, KEY_PRESS,
                           KEY_RELEASE, RawInputEvent)

# evdev key event values
_RELEASE, _PRESS, _REPEAT = range(3)

# Mouse buttons, renumbered the way X11 numbers them (4-7 are the two
# wheels, which evdev reports as relative motion instead)
EVDEV_BUTTONS = {
    ecodes.BTN_LEFT:        Button.LEFT,
    ecodes.BTN_MIDDLE:      Button.MIDDLE,
    ecodes.BTN_RIGHT:       Button.RIGHT,
    ecodes.BTN_SIDE:        8,
    ecodes.BTN_EXTRA:       9,
    ecodes.BTN_FORWARD:     10,
    ecodes.BTN_BACK:        11,
    ecodes.BTN_TASK:        12,
}

# evdev only knows physical keys. Which symbol a key carries (Super or
# Meta, AltGr or right Alt) is decided by the keymap, so hosts that know
# their layout pass a table like this one to from_evdev.
SUPER_KEYMAP = {
    ecodes.KEY_LEFTMETA:    Key.LEFT_SUPER,
    ecodes.KEY_RIGHTMETA:   Key.RIGHT_SUPER,
}
ALTGR_KEYMAP = {
    ecodes.KEY_RIGHTALT:    Key.ALTGR,
}


def from_evdev(event: InputEvent, keymap=None) -> Optional[RawInputEvent]:
    """
    Decodes one event already read from an evdev device.

    `keymap` maps evdev key codes to the key the active layout makes of
    them, e.g. `{**SUPER_KEYMAP, **ALTGR_KEYMAP}`. Without one the Windows
    key reads META_L and AltGr reads ALT_R.

    Returns None for anything that can't produce or change a label
    (sync reports, scan codes, pointer motion, LEDs...).
    """
    timestamp = event.timestamp()

    if event.type == ecodes.EV_KEY:
        if event.code in EVDEV_BUTTONS:
            button = EVDEV_BUTTONS[event.code]
            if event.value == _PRESS:
                return RawInputEvent(BUTTON_PRESS, button, timestamp)
            if event.value == _RELEASE:
                return RawInputEvent(BUTTON_RELEASE, button, timestamp)
            return None

        code = keymap.get(event.code, event.code) if keymap else event.code

        # auto-repeat comes through as more presses, the engine
        # collapses them into a counter
        if event.value in (_PRESS, _REPEAT):
            return RawInputEvent(KEY_PRESS, code, timestamp)
        if event.value == _RELEASE:
            return RawInputEvent(KEY_RELEASE, code, timestamp)
        return None

    if event.type == ecodes.EV_REL and event.code == ecodes.REL_WHEEL:
        if event.value == 0:
            return None
        return RawInputEvent.wheel(event.value > 0, timestamp)

    if event.type != ecodes.EV_SYN:
        debug(f"Skipping non-key event: type={event.type} code={event.code} "
              f"value={event.value}", ctx="--")
    return None
