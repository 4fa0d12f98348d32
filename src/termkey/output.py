import abc

from .models.label import DisplayLabel


class DisplaySink(abc.ABC):
    """
    Where finished labels go.

    Implementations own everything about actually showing a label:
    measuring the terminal, centering, colors, clearing the screen.
    The engine never looks at the terminal itself.
    """

    @abc.abstractmethod
    def emit(self, label: DisplayLabel):
        """
        Show one label. Called once per emitted label, in order, from the
        thread that feeds the engine.

        ``str(label)`` gives the text with any repeat suffix applied,
        e.g. "BACKSPACE [x3]".
        """


class NullSink(DisplaySink):
    """Discards labels, for hosts that only want the return values"""

    def emit(self, label: DisplayLabel):
        pass
