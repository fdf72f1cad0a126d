"""
Control System - fixed-rate loop driving gamepad polling
"""

from .control_loop import ControlLoop

__all__ = [
    "ControlLoop"
]
