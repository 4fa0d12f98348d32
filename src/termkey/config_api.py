import os

from typing import NamedTuple

from .lib.logger import debug, info


# ─── DEFAULTS ────────────────────────────────────────────────────────────────


# Auto-repeat on most systems fires every 25-40ms after the initial
# delay, so anything under this gap is treated as the same keystroke
# still going rather than a fresh press.
DEFAULT_REPEAT_THRESHOLD        = 0.1
# Buttons 1-5 are the classic X11 set (wheel included), extended
# pointing devices go up to 15 side/thumb buttons in practice.
DEFAULT_MAX_BUTTON              = 15
MIN_MAX_BUTTON                  = 5

_TIMEOUTS = {
    "repeat": DEFAULT_REPEAT_THRESHOLD,
}
_BUTTONS = {
    "max_button": DEFAULT_MAX_BUTTON,
}


class ConfigError(IOError):
    pass


class Configuration(NamedTuple):
    repeat_threshold: float
    max_button: int


def reset_configuration():
    _TIMEOUTS.clear()
    _TIMEOUTS["repeat"] = DEFAULT_REPEAT_THRESHOLD
    _BUTTONS.clear()
    _BUTTONS["max_button"] = DEFAULT_MAX_BUTTON


def get_configuration():
    return Configuration(
        repeat_threshold=_TIMEOUTS["repeat"],
        max_button=_BUTTONS["max_button"],
    )


# ─── API FOR USER CONFIG FILES ───────────────────────────────────────────────


def timeouts(repeat=DEFAULT_REPEAT_THRESHOLD):
    """
    Sets the repeat-collapsing window, in seconds.

    Two identical presses of the same key arriving within this window are
    counted as one keystroke repeating (`A [x2]`, `A [x3]`, ...) instead
    of two separate keystrokes.
    """
    if repeat < 0:
        raise ValueError(f"repeat timeout must not be negative, got {repeat}")
    _TIMEOUTS["repeat"] = repeat
    debug(f"CONFIG: repeat timeout set to {repeat}s")


def max_buttons(count=DEFAULT_MAX_BUTTON):
    """
    Sets the highest pointer button number that may be held.

    Presses of buttons above this number are ignored by the tracker.
    """
    if count < MIN_MAX_BUTTON:
        raise ValueError(
            f"max_buttons must be at least {MIN_MAX_BUTTON}, got {count}")
    _BUTTONS["max_button"] = count
    debug(f"CONFIG: highest trackable button set to {count}")


def load_config(path):
    """
    Runs a Python config file with the config API functions in scope.
    """
    if not os.path.exists(path):
        raise ConfigError(f"Config file not found: '{path}'")

    with open(path, "r", encoding="utf-8") as file:
        config_code = file.read()

    info(f"Loading config file: '{path}'")
    exec(compile(config_code, path, "exec"), {
        "timeouts": timeouts,
        "max_buttons": max_buttons,
    })
    return get_configuration()
