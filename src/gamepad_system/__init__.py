"""
Gamepad System Package

Edge detection (just pressed / just released / toggled) for gamepad buttons
and axes polled once per control loop tick, plus composite triggers that
gate higher-level actions.
"""

from .gamepad_keys import Axis, Button
from .errors import GamepadError, ChannelNotFoundError, InvalidThresholdError
from .interfaces import IGamepadSampler, IKeyReader
from .key_reader import KeyReader, AxisReader
from .toggle_reader import ToggleAxisReader
from .triggers import Trigger, GamepadButton, GamepadAxisButton
from .gamepad_reader import GamepadReader, DEFAULT_AXIS_THRESHOLD
from .mock_sampler import MockGamepadSampler
from .config import GamepadConfig

__all__ = [
    # Channels
    "Axis",
    "Button",
    # Errors
    "GamepadError",
    "ChannelNotFoundError",
    "InvalidThresholdError",
    # Interfaces
    "IGamepadSampler",
    "IKeyReader",
    # Edge detection
    "KeyReader",
    "AxisReader",
    "ToggleAxisReader",
    # Triggers
    "Trigger",
    "GamepadButton",
    "GamepadAxisButton",
    # Registry
    "GamepadReader",
    "DEFAULT_AXIS_THRESHOLD",
    # Samplers
    "MockGamepadSampler",
    # Configuration
    "GamepadConfig"
]
