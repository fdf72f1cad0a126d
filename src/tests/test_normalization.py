import pytest

from drive_system import IDriveTrain, Vector2d, drive_with_vector, normalize_wheel_speeds


class RecordingDriveTrain(IDriveTrain):
    def __init__(self):
        self.calls = []

    def drive_robot_centric(self, strafe_speed, forward_speed, turn_speed):
        self.calls.append((strafe_speed, forward_speed, turn_speed))


def test_scales_down_by_largest_magnitude():
    assert normalize_wheel_speeds([12, 3]) == [1.0, 0.25]


def test_zero_vector_unchanged():
    assert normalize_wheel_speeds([0, 0]) == [0, 0]


def test_within_range_unchanged():
    assert normalize_wheel_speeds([0.5, -1.0, 0.2]) == [0.5, -1.0, 0.2]


def test_negative_component_dominates():
    assert normalize_wheel_speeds([1.0, -4.0]) == [0.25, -1.0]


def test_input_not_mutated():
    speeds = [2.0, 1.0]
    normalize_wheel_speeds(speeds)
    assert speeds == [2.0, 1.0]


def test_empty():
    assert normalize_wheel_speeds([]) == []


def test_drive_with_vector():
    drive_train = RecordingDriveTrain()

    assert drive_with_vector(drive_train, Vector2d(12, 3)) == (1.0, 0.25)
    drive_with_vector(drive_train, Vector2d(0, 0), turn_speed=0.5)

    assert drive_train.calls == [(1.0, 0.25, 0.0), (0, 0, 0.5)]


def test_vector_is_immutable():
    vector = Vector2d(1.0, 2.0)
    with pytest.raises(AttributeError):
        vector.x = 3.0
