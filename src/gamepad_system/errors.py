"""
Gamepad system errors - all of them are caller misuse, none are transient
"""

import numbers


class GamepadError(Exception):
    pass


class ChannelNotFoundError(GamepadError, LookupError):
    """A query named something that is not a channel of the expected kind"""

    def __init__(self, channel, expected: str = "Button or Axis"):
        self.channel = channel
        self.expected = expected
        super().__init__(f"Channel not found: {channel!r} is not a {expected}")


class InvalidThresholdError(GamepadError, ValueError):
    """A threshold outside the channel's normalized range"""

    def __init__(self, threshold: float, low: float = 0.0, high: float = 1.0):
        self.threshold = threshold
        self.low = low
        self.high = high
        super().__init__(f"Invalid threshold {threshold!r}: must be within [{low}, {high}]")


def validate_threshold(threshold: float, max_magnitude: float = 1.0) -> float:
    """
    Check that a threshold lies in [0, max_magnitude].

    Returns:
        The threshold as float

    Raises:
        InvalidThresholdError: For out-of-range or non-numeric thresholds
    """
    if isinstance(threshold, bool) or not isinstance(threshold, numbers.Real):
        raise InvalidThresholdError(threshold, 0.0, max_magnitude)
    if not 0.0 <= threshold <= max_magnitude:
        raise InvalidThresholdError(threshold, 0.0, max_magnitude)
    return float(threshold)
