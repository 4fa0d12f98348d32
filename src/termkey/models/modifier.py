from enum import IntEnum, unique

from .key import Key


@unique
class Modifier(IntEnum):
    """
    The modifier keys we keep track of.

    Member values are the order in which held modifiers are listed in a
    label, so sorting modifiers sorts them for display.
    """

    CONTROL_L, CONTROL_R, ALT_L, ALT_R, SHIFT_L, SHIFT_R, \
        META_L, META_R, ALTGR, SUPER_L, SUPER_R = range(11)

    @property
    def key(self):
        return _MODIFIER_TO_KEY[self]

    @classmethod
    def from_key(cls, key):
        """Returns the Modifier for a key code, or None for ordinary keys"""
        return _KEY_TO_MODIFIER.get(key)

    @classmethod
    def is_key_modifier(cls, key):
        return key in _KEY_TO_MODIFIER

    def __str__(self):
        return self.name


# AltGr is deliberately not folded into ALT_R: some layouts report the
# right Alt key as one, some as the other, and we show what we're told.
_MODIFIER_TO_KEY = {
    Modifier.CONTROL_L:     Key.LEFT_CTRL,
    Modifier.CONTROL_R:     Key.RIGHT_CTRL,
    Modifier.ALT_L:         Key.LEFT_ALT,
    Modifier.ALT_R:         Key.RIGHT_ALT,
    Modifier.SHIFT_L:       Key.LEFT_SHIFT,
    Modifier.SHIFT_R:       Key.RIGHT_SHIFT,
    Modifier.META_L:        Key.LEFT_META,
    Modifier.META_R:        Key.RIGHT_META,
    Modifier.ALTGR:         Key.ALTGR,
    Modifier.SUPER_L:       Key.LEFT_SUPER,
    Modifier.SUPER_R:       Key.RIGHT_SUPER,
}
_KEY_TO_MODIFIER = {key: mod for mod, key in _MODIFIER_TO_KEY.items()}
