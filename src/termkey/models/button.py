from enum import IntEnum, unique


@unique
class Button(IntEnum):
    """Pointer buttons, numbered the way X11 numbers them"""

    LEFT, MIDDLE, RIGHT, WHEEL_UP, WHEEL_DOWN = range(1, 6)

    def __str__(self):
        return self.name


# Wheel "buttons" are transient: they never have a release to pair with
WHEEL_BUTTONS                   = (Button.WHEEL_UP, Button.WHEEL_DOWN)


def is_wheel_button(button):
    return button in WHEEL_BUTTONS
