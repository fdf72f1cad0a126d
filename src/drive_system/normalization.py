"""
Drive helpers - vector driving with wheel speed normalization
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class Vector2d:
    x: float
    y: float


class IDriveTrain(ABC):
    """Drivetrain driven in robot-centric terms, each input in -1.0..1.0"""

    @abstractmethod
    def drive_robot_centric(self, strafe_speed: float, forward_speed: float, turn_speed: float) -> None:
        pass


def normalize_wheel_speeds(wheel_speeds: Sequence[float]) -> List[float]:
    """
    Scale speeds down so none exceeds 1.0 in magnitude.

    Only applies when the largest magnitude is above 1.0; ratios between
    the speeds are kept.

    Example:
        normalize_wheel_speeds([12, 3])  # [1.0, 0.25]
        normalize_wheel_speeds([0, 0])   # [0, 0]
    """
    speeds = list(wheel_speeds)
    if not speeds:
        return speeds
    max_magnitude = max(abs(speed) for speed in speeds)
    if max_magnitude > 1.0:
        speeds = [speed / max_magnitude for speed in speeds]
    return speeds


def drive_with_vector(drive_train: IDriveTrain, vector: Vector2d, turn_speed: float = 0.0) -> Tuple[float, float]:
    """
    Drive along a vector, normalized so neither component exceeds 1.0.

    Returns:
        The (strafe, forward) speeds sent to the drivetrain
    """
    strafe, forward = normalize_wheel_speeds([vector.x, vector.y])
    drive_train.drive_robot_centric(strafe, forward, turn_speed)
    return strafe, forward
