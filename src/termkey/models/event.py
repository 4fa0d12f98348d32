from dataclasses import dataclass
from enum import IntEnum, unique
from typing import Union

from .button import Button
from .key import Key


@unique
class EventKind(IntEnum):

    KEY_RELEASE, KEY_PRESS, BUTTON_RELEASE, BUTTON_PRESS, \
        WHEEL_UP, WHEEL_DOWN = range(6)

    @property
    def is_pressed(self):
        return self in (EventKind.KEY_PRESS, EventKind.BUTTON_PRESS)

    @property
    def is_released(self):
        return self in (EventKind.KEY_RELEASE, EventKind.BUTTON_RELEASE)

    @property
    def is_key(self):
        return self in (EventKind.KEY_PRESS, EventKind.KEY_RELEASE)

    @property
    def is_button(self):
        return self in (EventKind.BUTTON_PRESS, EventKind.BUTTON_RELEASE)

    @property
    def is_wheel(self):
        return self in (EventKind.WHEEL_UP, EventKind.WHEEL_DOWN)

    def __str__(self):
        return self.name.lower()


KEY_PRESS                       = EventKind.KEY_PRESS
KEY_RELEASE                     = EventKind.KEY_RELEASE
BUTTON_PRESS                    = EventKind.BUTTON_PRESS
BUTTON_RELEASE                  = EventKind.BUTTON_RELEASE
WHEEL_UP                        = EventKind.WHEEL_UP
WHEEL_DOWN                      = EventKind.WHEEL_DOWN


@dataclass(frozen=True)
class RawInputEvent:
    # What happened
    kind: EventKind
    # Key code for key events, button number for button events. Wheel
    # events carry the matching wheel button.
    code: Union[Key, Button, int]
    # Seconds, as supplied by the host (never read from the clock here)
    timestamp: float            = 0.0

    @classmethod
    def wheel(cls, up, timestamp=0.0):
        if up:
            return cls(WHEEL_UP, Button.WHEEL_UP, timestamp)
        return cls(WHEEL_DOWN, Button.WHEEL_DOWN, timestamp)

    def __str__(self):
        return f"{self.kind} {self.code} @{self.timestamp:.3f}"
