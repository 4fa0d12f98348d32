from .models.button import Button
from .models.modifier import Modifier
from .naming import SEPARATOR, join_buttons, name_for_key
from .tracker import Tracker


class Composer:
    """
    Turns one press into a label body, reading (never writing) the tracker.

    Labels read left to right the way a chord is played: held buttons,
    then held modifiers in their fixed order, then the key itself.
    """

    def __init__(self, tracker: Tracker):
        self._tracker = tracker

    def compose_key(self, key) -> str:
        name = name_for_key(key).upper()
        own_mod = Modifier.from_key(key)

        # A modifier doesn't list itself, so Ctrl alone reads CONTROL_L,
        # not CONTROL_L + CONTROL_L
        mods = self._tracker.active_modifiers(excluding=own_mod)
        parts = [name_for_key(mod.key) for mod in mods]
        parts.append(name)
        body = SEPARATOR.join(parts)

        buttons = self._tracker.active_buttons()
        if buttons:
            body = join_buttons(buttons) + SEPARATOR + body
        return body

    def compose_buttons(self) -> str:
        return join_buttons(self._tracker.active_buttons())

    def compose_transient(self, button: Button) -> str:
        # wheel motion and buttons we can't hold never go into held
        # state, they only ride along with the buttons that are held
        return join_buttons(self._tracker.active_buttons() + [button])
