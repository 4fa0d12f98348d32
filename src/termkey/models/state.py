from dataclasses import dataclass, field, replace
from typing import Optional

from .modifier import Modifier


@dataclass
class ModifierState:
    # Modifier => whether it's held right now, every kind always present
    held: dict                  = field(
        default_factory=lambda: {mod: False for mod in Modifier})

    def copy(self):
        return replace(self, held=dict(self.held))

    def is_held(self, mod: Modifier):
        return self.held[mod]

    def clear(self):
        for mod in self.held:
            self.held[mod] = False


@dataclass
class ButtonSet:
    # Button number => whether it's held right now
    held: dict                  = field(default_factory=dict)
    # Always equal to the number of True entries in `held`
    count: int                  = 0
    # Timestamp of the most recent press, None until the first one
    last_press_time: Optional[float] = None

    def copy(self):
        return replace(self, held=dict(self.held))

    def is_held(self, button):
        return self.held.get(button, False)

    def clear(self):
        self.held.clear()
        self.count = 0


@dataclass
class TrackerState:
    modifiers: ModifierState    = field(default_factory=ModifierState)
    buttons: ButtonSet          = field(default_factory=ButtonSet)

    def copy(self):
        return TrackerState(self.modifiers.copy(), self.buttons.copy())


@dataclass
class RepeatState:
    # Key that produced the last label, None after any pointer event
    last_primary: Optional[int] = None
    # Label body last emitted for that key
    last_label: str             = ""
    # 1 for a fresh keystroke, 2+ while it keeps repeating
    occurrence_count: int       = 0
    # Timestamp of the last emitted label
    last_emit_time: Optional[float] = None

    def copy(self):
        return replace(self)

    def reset(self):
        self.last_primary = None
        self.last_label = ""
        self.occurrence_count = 0
        self.last_emit_time = None
