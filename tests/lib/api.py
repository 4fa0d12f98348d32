from termkey.models.button import Button
from termkey.models.event import (BUTTON_PRESS, BUTTON_RELEASE, KEY_PRESS,
                                  KEY_RELEASE, RawInputEvent)

_clock = [0.0]


def reset_clock():
    _clock[0] = 0.0


def at(seconds):
    _clock[0] = seconds


def later(seconds):
    _clock[0] += seconds


def _now():
    return _clock[0]


def press(engine, key):
    return engine.on_event(RawInputEvent(KEY_PRESS, key, _now()))


def release(engine, key):
    return engine.on_event(RawInputEvent(KEY_RELEASE, key, _now()))


def click(engine, button):
    return engine.on_event(RawInputEvent(BUTTON_PRESS, button, _now()))


def unclick(engine, button):
    return engine.on_event(RawInputEvent(BUTTON_RELEASE, button, _now()))


def wheel(engine, up=True):
    return engine.on_event(RawInputEvent.wheel(up, _now()))


__all__ = ["Button", "press", "release", "click", "unclick", "wheel",
           "at", "later", "reset_clock"]
