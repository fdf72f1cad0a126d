"""
Mock gamepad sampler - in-memory channel values for tests and replay
"""

from typing import Dict, Mapping, Optional

from .errors import ChannelNotFoundError
from .gamepad_keys import Axis, Button
from .interfaces import IGamepadSampler


class MockGamepadSampler(IGamepadSampler):
    """
    Gamepad sampler backed by plain dictionaries.

    All buttons start released and all axes at 0.0. Values change only
    through the setters, which lets tests script a raw sample sequence
    one loop tick at a time.

    Example:
        sampler = MockGamepadSampler()
        pad = GamepadReader(sampler, logger)

        sampler.set_button(Button.A, True)
        pad.poll_all()
        assert pad.was_just_pressed(Button.A)
    """

    def __init__(self, logger=None):
        self._logger = logger
        self._buttons: Dict[Button, bool] = {button: False for button in Button}
        self._axes: Dict[Axis, float] = {axis: 0.0 for axis in Axis}
        self.setup_calls = 0
        self.cleaned_up = False

    def set_button(self, button: Button, pressed: bool) -> None:
        if not isinstance(button, Button):
            raise ChannelNotFoundError(button, "Button")
        self._buttons[button] = bool(pressed)

    def set_axis(self, axis: Axis, value: float) -> None:
        """
        Set an axis value.

        Raises:
            ValueError: If value is outside the axis range
        """
        if not isinstance(axis, Axis):
            raise ChannelNotFoundError(axis, "Axis")
        if not axis.min_value <= value <= axis.max_value:
            raise ValueError(
                f"{axis.name} value {value} outside [{axis.min_value}, {axis.max_value}]"
            )
        self._axes[axis] = float(value)

    def set_state(self,
                  buttons: Optional[Mapping[Button, bool]] = None,
                  axes: Optional[Mapping[Axis, float]] = None) -> None:
        """Set several channels at once"""
        for button, pressed in (buttons or {}).items():
            self.set_button(button, pressed)
        for axis, value in (axes or {}).items():
            self.set_axis(axis, value)

    def release_all(self) -> None:
        """Back to the rest state: buttons up, axes centered"""
        for button in Button:
            self._buttons[button] = False
        for axis in Axis:
            self._axes[axis] = 0.0

    def read_button(self, button: Button) -> bool:
        try:
            return self._buttons[button]
        except KeyError:
            raise ChannelNotFoundError(button, "Button") from None

    def read_axis(self, axis: Axis) -> float:
        try:
            return self._axes[axis]
        except KeyError:
            raise ChannelNotFoundError(axis, "Axis") from None

    def setup(self) -> None:
        self.setup_calls += 1
        if self._logger:
            self._logger.debug("Mock gamepad sampler ready")

    def cleanup(self) -> None:
        self.cleaned_up = True
