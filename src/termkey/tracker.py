from typing import List, Optional

from .config_api import get_configuration
from .lib.logger import debug, warn
from .models.button import is_wheel_button
from .models.modifier import Modifier
from .models.state import TrackerState


class Tracker:
    """
    Owns the live modifier and pointer button state.

    Nothing else writes to the state; callers get copies or ordered lists.
    """

    def __init__(self, state: TrackerState = None, max_button=None):
        self._state = state if state is not None else TrackerState()
        if max_button is None:
            max_button = get_configuration().max_button
        self._max_button = max_button

    @property
    def state(self) -> TrackerState:
        # diagnostics only, mutating the copy has no effect on us
        return self._state.copy()

    def reset(self):
        self._state.modifiers.clear()
        self._state.buttons.clear()
        self._state.buttons.last_press_time = None

    # ─── KEYBOARD ────────────────────────────────────────────────────────────

    def on_key_event(self, key, is_press):
        mod = Modifier.from_key(key)
        if mod is None:
            # ordinary keys are the composer's business
            return
        self._state.modifiers.held[mod] = bool(is_press)
        debug(f"Modifier {mod} {'held' if is_press else 'lifted'}")

    def active_modifiers(self, excluding: Optional[Modifier] = None) -> List[Modifier]:
        modifiers = self._state.modifiers
        return [mod for mod in sorted(Modifier)
                if modifiers.is_held(mod) and mod != excluding]

    # ─── POINTER ─────────────────────────────────────────────────────────────

    def can_hold(self, button):
        return not is_wheel_button(button) and 1 <= button <= self._max_button

    def on_button_event(self, button, is_press, timestamp=None):
        """
        Returns True if the button set changed, False if the event was a
        duplicate press, a release of a button we never saw go down, or a
        button we don't track.
        """
        buttons = self._state.buttons

        if not self.can_hold(button):
            warn(f"Ignoring untrackable pointer button {button}")
            return False

        button = int(button)
        if is_press:
            if buttons.is_held(button):
                return False
            buttons.held[button] = True
            buttons.count += 1
            buttons.last_press_time = timestamp
            return True

        if not buttons.is_held(button):
            return False
        buttons.held[button] = False
        buttons.count -= 1
        if buttons.count <= 0:
            # wipe everything in case we ever got out of step with reality
            buttons.clear()
        return True

    def active_buttons(self) -> List[int]:
        return sorted(b for b, held in self._state.buttons.held.items() if held)
