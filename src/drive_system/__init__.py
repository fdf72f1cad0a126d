"""
Drive System - the drivetrain surface the gamepad feeds
"""

from .normalization import Vector2d, IDriveTrain, normalize_wheel_speeds, drive_with_vector

__all__ = [
    "Vector2d",
    "IDriveTrain",
    "normalize_wheel_speeds",
    "drive_with_vector"
]
