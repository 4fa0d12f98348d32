from enum import IntEnum, unique

from evdev import ecodes


# Symbols below have no input event code of their own, evdev reports
# the physical key they sit on. Input sources that resolve them from the
# active keymap (XKB level 3 shift, Super distinct from Meta) hand them
# over with these codes, placed past the end of the evdev key range.
_SYNTHETIC_BASE = ecodes.KEY_MAX + 1


@unique
class Key(IntEnum):
    """Keys by their Linux input event code"""

    ESC                 = ecodes.KEY_ESC
    KEY_1               = ecodes.KEY_1
    KEY_2               = ecodes.KEY_2
    KEY_3               = ecodes.KEY_3
    KEY_4               = ecodes.KEY_4
    KEY_5               = ecodes.KEY_5
    KEY_6               = ecodes.KEY_6
    KEY_7               = ecodes.KEY_7
    KEY_8               = ecodes.KEY_8
    KEY_9               = ecodes.KEY_9
    KEY_0               = ecodes.KEY_0
    MINUS               = ecodes.KEY_MINUS
    EQUAL               = ecodes.KEY_EQUAL
    BACKSPACE           = ecodes.KEY_BACKSPACE
    TAB                 = ecodes.KEY_TAB
    Q                   = ecodes.KEY_Q
    W                   = ecodes.KEY_W
    E                   = ecodes.KEY_E
    R                   = ecodes.KEY_R
    T                   = ecodes.KEY_T
    Y                   = ecodes.KEY_Y
    U                   = ecodes.KEY_U
    I                   = ecodes.KEY_I
    O                   = ecodes.KEY_O
    P                   = ecodes.KEY_P
    LEFT_BRACE          = ecodes.KEY_LEFTBRACE
    RIGHT_BRACE         = ecodes.KEY_RIGHTBRACE
    ENTER               = ecodes.KEY_ENTER
    LEFT_CTRL           = ecodes.KEY_LEFTCTRL
    A                   = ecodes.KEY_A
    S                   = ecodes.KEY_S
    D                   = ecodes.KEY_D
    F                   = ecodes.KEY_F
    G                   = ecodes.KEY_G
    H                   = ecodes.KEY_H
    J                   = ecodes.KEY_J
    K                   = ecodes.KEY_K
    L                   = ecodes.KEY_L
    SEMICOLON           = ecodes.KEY_SEMICOLON
    APOSTROPHE          = ecodes.KEY_APOSTROPHE
    GRAVE               = ecodes.KEY_GRAVE
    LEFT_SHIFT          = ecodes.KEY_LEFTSHIFT
    BACKSLASH           = ecodes.KEY_BACKSLASH
    Z                   = ecodes.KEY_Z
    X                   = ecodes.KEY_X
    C                   = ecodes.KEY_C
    V                   = ecodes.KEY_V
    B                   = ecodes.KEY_B
    N                   = ecodes.KEY_N
    M                   = ecodes.KEY_M
    COMMA               = ecodes.KEY_COMMA
    DOT                 = ecodes.KEY_DOT
    SLASH               = ecodes.KEY_SLASH
    RIGHT_SHIFT         = ecodes.KEY_RIGHTSHIFT
    KPASTERISK          = ecodes.KEY_KPASTERISK
    LEFT_ALT            = ecodes.KEY_LEFTALT
    SPACE               = ecodes.KEY_SPACE
    CAPSLOCK            = ecodes.KEY_CAPSLOCK
    F1                  = ecodes.KEY_F1
    F2                  = ecodes.KEY_F2
    F3                  = ecodes.KEY_F3
    F4                  = ecodes.KEY_F4
    F5                  = ecodes.KEY_F5
    F6                  = ecodes.KEY_F6
    F7                  = ecodes.KEY_F7
    F8                  = ecodes.KEY_F8
    F9                  = ecodes.KEY_F9
    F10                 = ecodes.KEY_F10
    NUMLOCK             = ecodes.KEY_NUMLOCK
    SCROLLLOCK          = ecodes.KEY_SCROLLLOCK
    KP7                 = ecodes.KEY_KP7
    KP8                 = ecodes.KEY_KP8
    KP9                 = ecodes.KEY_KP9
    KPMINUS             = ecodes.KEY_KPMINUS
    KP4                 = ecodes.KEY_KP4
    KP5                 = ecodes.KEY_KP5
    KP6                 = ecodes.KEY_KP6
    KPPLUS              = ecodes.KEY_KPPLUS
    KP1                 = ecodes.KEY_KP1
    KP2                 = ecodes.KEY_KP2
    KP3                 = ecodes.KEY_KP3
    KP0                 = ecodes.KEY_KP0
    KPDOT               = ecodes.KEY_KPDOT
    F11                 = ecodes.KEY_F11
    F12                 = ecodes.KEY_F12
    KPENTER             = ecodes.KEY_KPENTER
    RIGHT_CTRL          = ecodes.KEY_RIGHTCTRL
    KPSLASH             = ecodes.KEY_KPSLASH
    SYSRQ               = ecodes.KEY_SYSRQ
    RIGHT_ALT           = ecodes.KEY_RIGHTALT
    HOME                = ecodes.KEY_HOME
    UP                  = ecodes.KEY_UP
    PAGE_UP             = ecodes.KEY_PAGEUP
    LEFT                = ecodes.KEY_LEFT
    RIGHT               = ecodes.KEY_RIGHT
    END                 = ecodes.KEY_END
    DOWN                = ecodes.KEY_DOWN
    PAGE_DOWN           = ecodes.KEY_PAGEDOWN
    INSERT              = ecodes.KEY_INSERT
    DELETE              = ecodes.KEY_DELETE
    PAUSE               = ecodes.KEY_PAUSE
    LEFT_META           = ecodes.KEY_LEFTMETA
    RIGHT_META          = ecodes.KEY_RIGHTMETA
    COMPOSE             = ecodes.KEY_COMPOSE

    ALTGR               = _SYNTHETIC_BASE
    LEFT_SUPER          = _SYNTHETIC_BASE + 1
    RIGHT_SUPER         = _SYNTHETIC_BASE + 2

    def __str__(self):
        return self.name
