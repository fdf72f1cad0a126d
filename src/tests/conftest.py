import logging

import pytest

from gamepad_system import GamepadReader, MockGamepadSampler
from utils import HybridLogger


class ScriptedValue:
    """Raw supplier whose value the test sets between samples"""

    def __init__(self, value=0.0):
        self.value = value
        self.reads = 0

    def __call__(self):
        self.reads += 1
        return self.value


@pytest.fixture
def hybrid_logger():
    hybrid = HybridLogger("gamepad-tests", log_dir=None)
    yield hybrid
    hybrid.cleanup()


@pytest.fixture
def logger(hybrid_logger):
    return hybrid_logger.get_class_logger("Test", logging.DEBUG)


@pytest.fixture
def sampler():
    return MockGamepadSampler()


@pytest.fixture
def gamepad(sampler, logger):
    return GamepadReader(sampler, logger)


@pytest.fixture
def scripted():
    return ScriptedValue()
