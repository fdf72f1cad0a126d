"""
Gamepad channel enumerations - the fixed set of buttons and axes on one pad
"""

from enum import Enum, unique


@unique
class Button(Enum):
    """Discrete gamepad buttons"""
    Y = "y"
    X = "x"
    A = "a"
    B = "b"
    LEFT_BUMPER = "left_bumper"
    RIGHT_BUMPER = "right_bumper"
    BACK = "back"
    START = "start"
    DPAD_UP = "dpad_up"
    DPAD_DOWN = "dpad_down"
    DPAD_LEFT = "dpad_left"
    DPAD_RIGHT = "dpad_right"
    LEFT_STICK_BUTTON = "left_stick_button"
    RIGHT_STICK_BUTTON = "right_stick_button"


@unique
class Axis(Enum):
    """
    Continuous gamepad axes.

    Triggers report 0.0 (released) to 1.0 (fully pulled).
    Sticks report -1.0 to 1.0; pushing a stick forward reads negative.
    """
    LEFT_TRIGGER = "left_trigger"
    RIGHT_TRIGGER = "right_trigger"
    LEFT_STICK_X = "left_stick_x"
    RIGHT_STICK_X = "right_stick_x"
    LEFT_STICK_Y = "left_stick_y"
    RIGHT_STICK_Y = "right_stick_y"

    @property
    def is_trigger(self) -> bool:
        return self in (Axis.LEFT_TRIGGER, Axis.RIGHT_TRIGGER)

    @property
    def is_vertical_stick(self) -> bool:
        return self in (Axis.LEFT_STICK_Y, Axis.RIGHT_STICK_Y)

    @property
    def min_value(self) -> float:
        return 0.0 if self.is_trigger else -1.0

    @property
    def max_value(self) -> float:
        return 1.0

    @property
    def max_magnitude(self) -> float:
        return max(abs(self.min_value), abs(self.max_value))
