from typing import Optional

from .config_api import get_configuration
from .lib.logger import debug
from .models.label import DisplayLabel
from .models.modifier import Modifier
from .models.state import RepeatState


class RepeatCollapser:
    """
    Collapses auto-repeat into one label with a running count.

    A press continues the current run when it is the same non-modifier
    key, composed to the same label, and arrives within the threshold
    of the last emitted label. Anything else starts a new run at 1.

    Invalidated on:
    - Different key press
    - Different label for the same key (modifiers or buttons changed)
    - Modifier key press
    - Gap longer than the threshold
    - Any pointer event
    """

    def __init__(self, threshold=None):
        if threshold is None:
            threshold = get_configuration().repeat_threshold
        self.threshold = threshold
        self._state = RepeatState()

    @property
    def state(self) -> RepeatState:
        return self._state.copy()

    def reset(self):
        if self._state.last_primary is not None:
            debug("Repeat run interrupted")
        self._state.reset()

    def _continues_run(self, key, body, timestamp):
        st = self._state
        if st.last_primary is None or st.last_emit_time is None:
            return False
        if Modifier.is_key_modifier(key):
            return False
        return (key == st.last_primary
                and body == st.last_label
                and timestamp - st.last_emit_time <= self.threshold)

    def collapse(self, key, body, timestamp) -> Optional[DisplayLabel]:
        if not body:
            return None

        st = self._state
        if self._continues_run(key, body, timestamp):
            st.occurrence_count += 1
            st.last_emit_time = timestamp
            return DisplayLabel(body, st.occurrence_count)

        st.last_primary = key
        st.last_label = body
        st.occurrence_count = 1
        st.last_emit_time = timestamp
        return DisplayLabel(body)
