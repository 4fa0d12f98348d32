from typing import Optional

from .composer import Composer
from .config_api import get_configuration
from .lib import logger
from .lib.logger import debug, log
from .models.button import Button
from .models.event import EventKind, RawInputEvent
from .models.label import DisplayLabel
from .models.state import RepeatState, TrackerState
from .output import DisplaySink, NullSink
from .repeat import RepeatCollapser
from .tracker import Tracker

# X11 reports wheel motion as presses (and releases) of buttons 4 and 5
_WHEEL_BUTTON_KINDS = {
    Button.WHEEL_UP:    EventKind.WHEEL_UP,
    Button.WHEEL_DOWN:  EventKind.WHEEL_DOWN,
}


# ─── EVENT PROCESSING PIPELINE ──────────────────────────────────────────────

# One event at a time, start to finish:
#
# - on_event
#   - tracker update (every key/button event)
#   - composer (presses and wheel only)
#   - repeat collapser
#   - display sink


class Engine:
    """
    Single-writer pipeline from raw input events to display labels.

    Not thread safe: feed it from one thread (or one asyncio task, see
    ``termkey.pump``).
    """

    def __init__(self, sink: DisplaySink = None, config=None):
        config = config or get_configuration()
        self._sink = sink if sink is not None else NullSink()
        self._tracker = Tracker(max_button=config.max_button)
        self._composer = Composer(self._tracker)
        self._repeat = RepeatCollapser(threshold=config.repeat_threshold)

    @property
    def tracker(self) -> Tracker:
        return self._tracker

    @property
    def tracker_state(self) -> TrackerState:
        return self._tracker.state

    @property
    def repeat_state(self) -> RepeatState:
        return self._repeat.state

    def reset(self):
        self._tracker.reset()
        self._repeat.reset()

    def on_event(self, event: RawInputEvent) -> Optional[DisplayLabel]:
        if not isinstance(event, RawInputEvent):
            raise TypeError(f'Expected type RawInputEvent, received {type(event)}.')

        if logger.VERBOSE:
            debug()
            debug(f"in {event}", ctx="II")

        kind, code = event.kind, event.code

        if not kind.is_key:
            # mouse activity never inherits a keyboard repeat count,
            # releases included
            self._repeat.reset()

        if kind.is_button and code in _WHEEL_BUTTON_KINDS:
            if kind.is_released:
                return None
            kind = _WHEEL_BUTTON_KINDS[code]

        if kind.is_key:
            self._tracker.on_key_event(code, kind.is_pressed)
            if kind.is_released:
                return None
            body = self._composer.compose_key(code)
            label = self._repeat.collapse(code, body, event.timestamp)

        elif kind.is_wheel:
            wheel = Button.WHEEL_UP if kind == EventKind.WHEEL_UP else Button.WHEEL_DOWN
            label = DisplayLabel(self._composer.compose_transient(wheel))

        elif kind.is_released:
            self._tracker.on_button_event(code, False, event.timestamp)
            return None

        elif not self._tracker.can_hold(code):
            # still show something, UNKNOWN BUTTON or CLICK BUTTON n
            label = DisplayLabel(self._composer.compose_transient(code))

        elif self._tracker.on_button_event(code, True, event.timestamp):
            label = DisplayLabel(self._composer.compose_buttons())

        else:
            # already held, nothing changed
            return None

        debug(f"out '{label}'", ctx="OO")
        self._sink.emit(label)
        return label

    def dump_diagnostics(self):
        state = self._tracker.state
        log("*** ENGINE ***")
        log("modifiers held:", self._tracker.active_modifiers())
        log("buttons held:", self._tracker.active_buttons(),
            f"(count {state.buttons.count}, last press {state.buttons.last_press_time})")
        log("repeat state:", self._repeat.state)
