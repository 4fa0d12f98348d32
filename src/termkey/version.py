__name__ = "termkey"

__version__ = "0.3.0"

__description__ = "Show what you just pressed, centered on your terminal."

__doc__ = """
``termkey`` turns raw keyboard and pointer events into one readable label
per keystroke, the way a screencast key overlay would, but for a terminal.

- Chords read left to right: `CONTROL_L + SHIFT_L + T`
- A modifier pressed on its own shows by itself: `SUPER_L`
- Held pointer buttons join the label: `LEFT CLICK + RIGHT CLICK`
- Auto-repeat collapses into one label with a counter: `BACKSPACE [x7]`
"""
