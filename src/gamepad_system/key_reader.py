"""
Edge detectors for single gamepad channels
"""

from typing import Callable

from .errors import validate_threshold
from .interfaces import IKeyReader


class KeyReader(IKeyReader):
    """
    Previous/current edge detector over any boolean supplier.

    The reader is seeded with one reading at construction and
    previous == current, so no edge is reported before the first sample().

    Example:
        reader = KeyReader(lambda: sampler.read_button(Button.A))

        while True:
            reader.sample()
            if reader.was_just_pressed():
                start_intake()
    """

    def __init__(self, state_supplier: Callable[[], object]):
        """
        Args:
            state_supplier: Returns the raw channel value on every call
        """
        self._state_supplier = state_supplier
        self._current_state: bool = self._read_state()
        self._last_state: bool = self._current_state
        self._samples_taken = 0

    def _to_state(self, raw) -> bool:
        """Rule turning a raw reading into pressed/released"""
        return bool(raw)

    def _read_state(self) -> bool:
        return self._to_state(self._state_supplier())

    @property
    def samples_taken(self) -> int:
        """Number of sample() calls since construction"""
        return self._samples_taken

    def sample(self) -> None:
        self._last_state = self._current_state
        self._current_state = self._read_state()
        self._samples_taken += 1

    def is_down(self) -> bool:
        return self._current_state

    def was_just_pressed(self) -> bool:
        return not self._last_state and self._current_state

    def was_just_released(self) -> bool:
        return self._last_state and not self._current_state

    def state_just_changed(self) -> bool:
        return self._last_state != self._current_state

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(previous={self._last_state}, "
                f"current={self._current_state})")


class AxisReader(KeyReader):
    """
    Edge detector for a continuous value.

    The axis counts as down while abs(value) > threshold. The comparison is
    strict and ignores the sign, so a stick pushed either way is "down".
    """

    def __init__(self,
                 axis_state: Callable[[], float],
                 threshold: float,
                 max_magnitude: float = 1.0):
        """
        Args:
            axis_state: Returns the raw axis value on every call
            threshold: Magnitude the value must exceed, in [0, max_magnitude]
            max_magnitude: Largest magnitude the axis can report

        Raises:
            InvalidThresholdError: If threshold is out of range
        """
        # Must be set before the seeding read in KeyReader.__init__
        self._threshold = validate_threshold(threshold, max_magnitude)
        super().__init__(axis_state)

    @property
    def threshold(self) -> float:
        return self._threshold

    def _to_state(self, raw) -> bool:
        return abs(raw) > self._threshold
