"""
Gamepad system configuration
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .errors import validate_threshold


TRUE_WORDS = ("1", "true", "yes", "y", "on")


def env_bool(name: str, default: bool) -> bool:
    """
    Read a boolean environment variable.

    Args:
        name: Variable name
        default: Value used when the variable is not set

    Returns:
        True for 1/true/yes/y/on (any case), False for anything else
    """
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in TRUE_WORDS


def env_int(name: str, default: int) -> int:
    """Read an integer environment variable (ValueError if malformed)"""
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return int(raw_value)


def env_float(name: str, default: float) -> float:
    """Read a float environment variable (ValueError if malformed)"""
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return float(raw_value)


def env_str(name: str, default: Optional[str]) -> Optional[str]:
    """Read a string environment variable; an empty value is returned as-is"""
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value


@dataclass
class GamepadConfig:
    """Gamepad input and control loop configuration"""

    # Hardware
    joystick_index: int = 0
    triggers_full_range: bool = True

    # Edge detection
    axis_threshold: float = 0.05
    negate_y_axis: bool = False

    # Timing
    frame_duration_ms: int = 20
    status_interval_ms: int = 10000

    # Logging (log_dir None = console only)
    log_dir: Optional[str] = "logs"
    log_level: str = "INFO"

    @property
    def target_hz(self) -> float:
        """Loop rate derived from frame duration"""
        return 1000.0 / self.frame_duration_ms

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    def validate(self) -> None:
        """
        Check the configuration before anything is built.

        Raises:
            InvalidThresholdError: If axis_threshold is out of range
            ValueError: For any other bad value
        """
        validate_threshold(self.axis_threshold)

        if self.joystick_index < 0:
            raise ValueError(f"joystick_index must be >= 0, got {self.joystick_index}")
        if self.frame_duration_ms <= 0:
            raise ValueError(f"frame_duration_ms must be positive, got {self.frame_duration_ms}")
        if self.status_interval_ms <= 0:
            raise ValueError(f"status_interval_ms must be positive, got {self.status_interval_ms}")
        if not isinstance(self.log_level_value, int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls, prefix: str = "GAMEPAD_") -> 'GamepadConfig':
        """
        Build a config from environment variables, falling back to defaults.

        Reads {prefix}JOYSTICK_INDEX, {prefix}TRIGGERS_FULL_RANGE,
        {prefix}AXIS_THRESHOLD, {prefix}NEGATE_Y_AXIS, {prefix}FRAME_MS,
        {prefix}STATUS_MS, {prefix}LOG_DIR ("" for console only) and
        {prefix}LOG_LEVEL.
        """
        defaults = cls()
        log_dir = env_str(f"{prefix}LOG_DIR", defaults.log_dir)
        config = cls(
            joystick_index=env_int(f"{prefix}JOYSTICK_INDEX", defaults.joystick_index),
            triggers_full_range=env_bool(f"{prefix}TRIGGERS_FULL_RANGE", defaults.triggers_full_range),
            axis_threshold=env_float(f"{prefix}AXIS_THRESHOLD", defaults.axis_threshold),
            negate_y_axis=env_bool(f"{prefix}NEGATE_Y_AXIS", defaults.negate_y_axis),
            frame_duration_ms=env_int(f"{prefix}FRAME_MS", defaults.frame_duration_ms),
            status_interval_ms=env_int(f"{prefix}STATUS_MS", defaults.status_interval_ms),
            log_dir=log_dir or None,
            log_level=env_str(f"{prefix}LOG_LEVEL", defaults.log_level),
        )
        config.validate()
        return config
