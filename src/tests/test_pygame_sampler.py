from types import SimpleNamespace

import pytest

from gamepad_system import Axis, Button, ChannelNotFoundError, GamepadReader
from gamepad_system import pygame_sampler
from gamepad_system.pygame_sampler import PygameGamepadSampler


class FakeJoystick:
    def __init__(self, index, num_axes=6, num_buttons=11, num_hats=1):
        self.index = index
        self.axes = [0.0] * num_axes
        self.buttons = [0] * num_buttons
        self.hats = [(0, 0)] * num_hats
        self.initialized = False
        self.quit_called = False

    def init(self):
        self.initialized = True

    def quit(self):
        self.quit_called = True

    def get_name(self):
        return "Fake Xbox Controller"

    def get_numaxes(self):
        return len(self.axes)

    def get_numbuttons(self):
        return len(self.buttons)

    def get_numhats(self):
        return len(self.hats)

    def get_axis(self, idx):
        return self.axes[idx]

    def get_button(self, idx):
        return self.buttons[idx]

    def get_hat(self, idx):
        return self.hats[idx]


@pytest.fixture
def fake_pygame(monkeypatch):
    state = SimpleNamespace(count=1, joystick=None, pumps=0, inits=0)

    def make_joystick(index):
        state.joystick = FakeJoystick(index)
        # triggers rest at -1.0 in full range mode
        state.joystick.axes[2] = -1.0
        state.joystick.axes[5] = -1.0
        return state.joystick

    def init():
        state.inits += 1

    def pump():
        state.pumps += 1

    fake = SimpleNamespace(
        init=init,
        joystick=SimpleNamespace(
            init=lambda: None,
            get_count=lambda: state.count,
            Joystick=make_joystick,
        ),
        event=SimpleNamespace(pump=pump),
    )
    monkeypatch.setattr(pygame_sampler, "pygame", fake)
    return state


def test_setup_opens_joystick_once(fake_pygame, logger):
    sampler = PygameGamepadSampler(logger)
    sampler.setup()
    first = fake_pygame.joystick
    sampler.setup()

    assert first.initialized
    assert fake_pygame.joystick is first
    assert fake_pygame.inits == 1


def test_setup_without_controller_raises(fake_pygame, logger):
    fake_pygame.count = 0
    with pytest.raises(RuntimeError, match="No controller found"):
        PygameGamepadSampler(logger).setup()


def test_read_before_setup_raises(fake_pygame, logger):
    with pytest.raises(RuntimeError):
        PygameGamepadSampler(logger).read_button(Button.A)


def test_buttons_follow_index_map(fake_pygame, logger):
    sampler = PygameGamepadSampler(logger)
    sampler.setup()
    fake_pygame.joystick.buttons[0] = 1
    fake_pygame.joystick.buttons[7] = 1

    assert sampler.read_button(Button.A) is True
    assert sampler.read_button(Button.START) is True
    assert sampler.read_button(Button.B) is False
    assert fake_pygame.pumps == 3


def test_dpad_reads_hat(fake_pygame, logger):
    sampler = PygameGamepadSampler(logger)
    sampler.setup()
    fake_pygame.joystick.hats[0] = (-1, 1)

    assert sampler.read_button(Button.DPAD_LEFT)
    assert sampler.read_button(Button.DPAD_UP)
    assert not sampler.read_button(Button.DPAD_RIGHT)
    assert not sampler.read_button(Button.DPAD_DOWN)


def test_dpad_without_hat_is_released(fake_pygame, logger):
    sampler = PygameGamepadSampler(logger)
    sampler.setup()
    fake_pygame.joystick.hats = []
    assert sampler.read_button(Button.DPAD_UP) is False


def test_triggers_remapped_to_unit_range(fake_pygame, logger):
    sampler = PygameGamepadSampler(logger)
    sampler.setup()

    assert sampler.read_axis(Axis.LEFT_TRIGGER) == 0.0
    fake_pygame.joystick.axes[2] = 1.0
    assert sampler.read_axis(Axis.LEFT_TRIGGER) == 1.0
    fake_pygame.joystick.axes[5] = 0.0
    assert sampler.read_axis(Axis.RIGHT_TRIGGER) == 0.5


def test_triggers_already_positive(fake_pygame, logger):
    sampler = PygameGamepadSampler(logger, triggers_full_range=False)
    sampler.setup()
    assert sampler.read_axis(Axis.LEFT_TRIGGER) == 0.0
    fake_pygame.joystick.axes[2] = 0.4
    assert sampler.read_axis(Axis.LEFT_TRIGGER) == 0.4


def test_sticks_pass_through(fake_pygame, logger):
    sampler = PygameGamepadSampler(logger)
    sampler.setup()
    fake_pygame.joystick.axes[1] = -0.75
    fake_pygame.joystick.axes[4] = 0.25

    assert sampler.read_axis(Axis.LEFT_STICK_Y) == -0.75
    assert sampler.read_axis(Axis.RIGHT_STICK_Y) == 0.25


def test_custom_map_and_missing_axis(fake_pygame, logger):
    sampler = PygameGamepadSampler(logger, axis_map={Axis.RIGHT_STICK_X: 9},
                                   button_map={Button.A: 3})
    sampler.setup()
    fake_pygame.joystick.buttons[3] = 1

    assert sampler.read_axis(Axis.RIGHT_STICK_X) == 0.0
    assert sampler.read_button(Button.A) is True


def test_unknown_channel(fake_pygame, logger):
    sampler = PygameGamepadSampler(logger)
    sampler.setup()
    with pytest.raises(ChannelNotFoundError):
        sampler.read_axis("LT")


def test_cleanup_quits_joystick(fake_pygame, logger):
    sampler = PygameGamepadSampler(logger)
    sampler.setup()
    joystick = fake_pygame.joystick
    sampler.cleanup()

    assert joystick.quit_called
    with pytest.raises(RuntimeError):
        sampler.read_axis(Axis.LEFT_STICK_X)


def test_gamepad_reader_over_pygame(fake_pygame, logger):
    sampler = PygameGamepadSampler(logger)
    pad = GamepadReader(sampler, logger, negate_y_axis=True)

    fake_pygame.joystick.axes[1] = -1.0
    fake_pygame.joystick.buttons[1] = 1
    pad.poll_all()

    assert pad.get_left_y() == 1.0
    assert pad.was_just_pressed(Button.B)
    assert pad.was_just_pressed(Axis.LEFT_STICK_Y)
    assert not pad.is_down(Axis.LEFT_TRIGGER)
