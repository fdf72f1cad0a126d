"""
Toggle detector - a latch that flips each time an axis is released
"""

from typing import Callable

from .key_reader import AxisReader


class ToggleAxisReader:
    """
    Persistent on/off flag driven by the release edges of an axis.

    Holds its own AxisReader rather than extending it. sample() must run on
    the same polling cadence as everything else; get_state() then reads the
    release edge captured by that sample.

    NOTE: get_state() is not a pure query. It flips the stored flag when the
    owned reader reports a release edge. Each release edge flips the flag at
    most once, so repeated calls between two samples return the same value.

    Example:
        slow_mode = ToggleAxisReader(lambda: pad.get_axis(Axis.LEFT_TRIGGER), 0.5)

        while True:
            slow_mode.sample()
            speed = 0.3 if slow_mode.get_state() else 1.0
    """

    def __init__(self, axis_state: Callable[[], float], threshold: float):
        self._reader = AxisReader(axis_state, threshold)
        self._toggle_state = False
        # Sample number whose release edge already flipped the flag
        self._flipped_at_sample = -1

    @property
    def reader(self) -> AxisReader:
        """The owned axis edge detector"""
        return self._reader

    def sample(self) -> None:
        self._reader.sample()

    def get_state(self) -> bool:
        """
        Flip the flag if the axis was just released, then return it.

        Returns:
            Current toggle state (starts False)
        """
        sample_number = self._reader.samples_taken
        if self._reader.was_just_released() and self._flipped_at_sample != sample_number:
            self._toggle_state = not self._toggle_state
            self._flipped_at_sample = sample_number
        return self._toggle_state
