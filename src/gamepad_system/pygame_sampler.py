"""
Pygame joystick gamepad sampler
"""

import os
from typing import Dict, Mapping, Optional

import pygame

from .errors import ChannelNotFoundError
from .gamepad_keys import Axis, Button
from .interfaces import IGamepadSampler

# Hat 0 direction that drives each D-pad button: (hat index in tuple, value)
DPAD_HAT_DIRECTIONS: Dict[Button, tuple] = {
    Button.DPAD_LEFT: (0, -1),
    Button.DPAD_RIGHT: (0, 1),
    Button.DPAD_DOWN: (1, -1),
    Button.DPAD_UP: (1, 1),
}


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class PygameGamepadSampler(IGamepadSampler):
    """
    Reads an Xbox-style controller through pygame's joystick module.

    Default maps match a common Xbox controller under SDL2. Pass axis_map or
    button_map to override individual channels; unmapped or missing channels
    read as released/0.0. The D-pad comes from hat 0 when the device has one.

    Sticks are passed through unchanged (pygame reports stick-up as negative).
    Triggers are remapped into 0.0..1.0.

    Example:
        sampler = PygameGamepadSampler(logger, index=0)
        pad = GamepadReader(sampler, logger)
    """

    DEFAULT_AXIS_MAP: Dict[Axis, int] = {
        Axis.LEFT_STICK_X: 0,
        Axis.LEFT_STICK_Y: 1,
        Axis.LEFT_TRIGGER: 2,
        Axis.RIGHT_STICK_X: 3,
        Axis.RIGHT_STICK_Y: 4,
        Axis.RIGHT_TRIGGER: 5,
    }

    DEFAULT_BUTTON_MAP: Dict[Button, int] = {
        Button.A: 0,
        Button.B: 1,
        Button.X: 2,
        Button.Y: 3,
        Button.LEFT_BUMPER: 4,
        Button.RIGHT_BUMPER: 5,
        Button.BACK: 6,
        Button.START: 7,
        Button.LEFT_STICK_BUTTON: 9,
        Button.RIGHT_STICK_BUTTON: 10,
    }

    def __init__(self,
                 logger,
                 index: int = 0,
                 axis_map: Optional[Mapping[Axis, int]] = None,
                 button_map: Optional[Mapping[Button, int]] = None,
                 triggers_full_range: bool = True):
        """
        Args:
            logger: ClassLogger instance for logging
            index: pygame joystick index
            axis_map: Axis -> pygame axis index overrides
            button_map: Button -> pygame button index overrides
            triggers_full_range: Triggers report -1.0 (released) .. 1.0; if
                False they already report 0.0 .. 1.0
        """
        self._logger = logger
        self._index = index
        self._axis_map: Dict[Axis, int] = dict(self.DEFAULT_AXIS_MAP)
        self._axis_map.update(axis_map or {})
        self._button_map: Dict[Button, int] = dict(self.DEFAULT_BUTTON_MAP)
        self._button_map.update(button_map or {})
        self._triggers_full_range = triggers_full_range
        self._joystick = None

    def setup(self) -> None:
        """Open the joystick. Calling again once open does nothing."""
        if self._joystick is not None:
            return

        os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
        pygame.init()
        pygame.joystick.init()

        if pygame.joystick.get_count() <= self._index:
            self._logger.error(f"No joystick at index {self._index} - is the controller on and paired?")
            raise RuntimeError(f"No controller found at index {self._index}")

        joystick = pygame.joystick.Joystick(self._index)
        joystick.init()
        self._joystick = joystick

        self._logger.info(
            f"Pygame gamepad sampler initialized: {joystick.get_name()} "
            f"(axes={joystick.get_numaxes()}, buttons={joystick.get_numbuttons()}, "
            f"hats={joystick.get_numhats()})"
        )

    def _require_joystick(self):
        if self._joystick is None:
            raise RuntimeError("PygameGamepadSampler.setup() has not been called")
        pygame.event.pump()
        return self._joystick

    def read_button(self, button: Button) -> bool:
        if not isinstance(button, Button):
            raise ChannelNotFoundError(button, "Button")
        joystick = self._require_joystick()

        if button in DPAD_HAT_DIRECTIONS and joystick.get_numhats() > 0:
            position, direction = DPAD_HAT_DIRECTIONS[button]
            return joystick.get_hat(0)[position] == direction

        idx = self._button_map.get(button)
        if idx is None or idx >= joystick.get_numbuttons():
            return False
        return bool(joystick.get_button(idx))

    def read_axis(self, axis: Axis) -> float:
        if not isinstance(axis, Axis):
            raise ChannelNotFoundError(axis, "Axis")
        joystick = self._require_joystick()

        idx = self._axis_map.get(axis)
        if idx is None or idx >= joystick.get_numaxes():
            return 0.0

        value = _clamp(float(joystick.get_axis(idx)), -1.0, 1.0)
        if not axis.is_trigger:
            return value
        if self._triggers_full_range:
            return (value + 1.0) * 0.5
        return _clamp(value, 0.0, 1.0)

    def cleanup(self) -> None:
        if self._joystick is not None:
            self._joystick.quit()
            self._joystick = None
            self._logger.info("Pygame gamepad sampler cleaned up")
