"""
Abstract interfaces for gamepad reading systems
"""

from abc import ABC, abstractmethod

from .gamepad_keys import Axis, Button


class IGamepadSampler(ABC):
    """
    Abstract interface for sampling raw gamepad channels.

    Separates reading the hardware from edge detection and state tracking.
    Implementations: pygame joystick, in-memory mock, recorded replay, etc.
    Reads are unbuffered and always return the latest physical value.
    """

    @abstractmethod
    def read_button(self, button: Button) -> bool:
        """
        Read the current state of a single button.

        Args:
            button: Button channel

        Returns:
            True if the button is currently pressed
        """
        pass

    @abstractmethod
    def read_axis(self, axis: Axis) -> float:
        """
        Read the current value of a single axis.

        Args:
            axis: Axis channel

        Returns:
            0.0..1.0 for triggers, -1.0..1.0 for sticks
        """
        pass

    @abstractmethod
    def setup(self) -> None:
        """Initialize the sampler hardware/resources (must be safe to call twice)"""
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Cleanup sampler resources"""
        pass


class IKeyReader(ABC):
    """
    Edge detector contract for one channel.

    State only moves on sample(); every query answers from the
    previous/current pair captured by the last two samples.
    """

    @abstractmethod
    def sample(self) -> None:
        """Shift current to previous and take a fresh reading. Once per loop tick."""
        pass

    @abstractmethod
    def is_down(self) -> bool:
        pass

    @abstractmethod
    def was_just_pressed(self) -> bool:
        pass

    @abstractmethod
    def was_just_released(self) -> bool:
        pass

    @abstractmethod
    def state_just_changed(self) -> bool:
        pass
