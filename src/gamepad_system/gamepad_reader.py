"""
Gamepad reader - one edge detector per channel, polled in lockstep
"""

from functools import partial
from typing import Dict, Iterable, Mapping, Optional, Union

from .errors import ChannelNotFoundError, validate_threshold
from .gamepad_keys import Axis, Button
from .interfaces import IGamepadSampler
from .key_reader import AxisReader, KeyReader
from .toggle_reader import ToggleAxisReader
from .triggers import GamepadAxisButton, GamepadButton

Channel = Union[Button, Axis]

DEFAULT_AXIS_THRESHOLD = 0.05


class GamepadReader:
    """
    Gamepad with edge detection on every button and axis.

    Uses IGamepadSampler for the raw values (pygame, mock, replay, etc.).
    Owns exactly one KeyReader per Button and one AxisReader per Axis, all
    built and seeded here, so nothing reports an edge before the first poll.

    Call poll_all() once per loop tick, then ask the buffered queries
    (is_down, was_just_pressed, ...). get_button/get_axis and the triggers
    read the sampler directly and ignore polling.

    Example:
        hybrid = HybridLogger("robot")
        logger = hybrid.get_class_logger("GamepadReader", logging.INFO)
        pad = GamepadReader(PygameGamepadSampler(logger=logger), logger)

        while True:
            pad.poll_all()
            if pad.was_just_pressed(Button.A):
                logger.info("A pressed")
    """

    def __init__(self,
                 sampler: IGamepadSampler,
                 logger,
                 axis_threshold: float = DEFAULT_AXIS_THRESHOLD,
                 axis_thresholds: Optional[Mapping[Axis, float]] = None,
                 negate_y_axis: bool = False):
        """
        Initialize the gamepad reader with an injected sampler.

        Args:
            sampler: IGamepadSampler for the raw channel values
            logger: ClassLogger instance from HybridLogger.get_class_logger()
            axis_threshold: Threshold for every axis reader without an override
            axis_thresholds: Per-axis threshold overrides
            negate_y_axis: Flip the sign of get_left_y()/get_right_y()

        Raises:
            InvalidThresholdError: If any threshold is out of range
            ChannelNotFoundError: If an override key is not an Axis
        """
        self._sampler = sampler
        self._logger = logger
        self._axis_threshold = validate_threshold(axis_threshold)
        self._y_multiplier = -1 if negate_y_axis else 1

        overrides: Dict[Axis, float] = {}
        for axis, threshold in (axis_thresholds or {}).items():
            if not isinstance(axis, Axis):
                raise ChannelNotFoundError(axis, "Axis")
            overrides[axis] = validate_threshold(threshold, axis.max_magnitude)

        self._sampler.setup()
        try:
            self._build_readers(overrides)
        except Exception:
            # No reader is returned, so release what setup() opened
            self._sampler.cleanup()
            raise

        self._logger.info(
            f"GamepadReader initialized: {len(self._button_readers)} buttons, "
            f"{len(self._axis_readers)} axes, threshold={self._axis_threshold}"
        )
        if overrides:
            self._logger.debug(
                "Axis threshold overrides: "
                + ", ".join(f"{axis.name}={value}" for axis, value in overrides.items())
            )

    def _build_readers(self, overrides: Mapping[Axis, float]) -> None:
        """Create and seed one reader per channel, plus the per-button triggers"""
        self._button_readers: Dict[Button, KeyReader] = {
            button: KeyReader(partial(self.get_button, button))
            for button in Button
        }
        self._axis_readers: Dict[Axis, AxisReader] = {
            axis: AxisReader(partial(self.get_axis, axis),
                             overrides.get(axis, self._axis_threshold),
                             axis.max_magnitude)
            for axis in Axis
        }
        self._gamepad_buttons: Dict[Button, GamepadButton] = {
            button: GamepadButton(self, [button]) for button in Button
        }

    # ------------------------------------------------------------------
    # Immediate (unbuffered) access
    # ------------------------------------------------------------------

    def get_button(self, button: Button) -> bool:
        """Raw button value straight from the sampler"""
        if not isinstance(button, Button):
            raise ChannelNotFoundError(button, "Button")
        return bool(self._sampler.read_button(button))

    def get_axis(self, axis: Axis) -> float:
        """Raw axis value straight from the sampler (no sign convention applied)"""
        if not isinstance(axis, Axis):
            raise ChannelNotFoundError(axis, "Axis")
        return float(self._sampler.read_axis(axis))

    def get_left_trigger(self) -> float:
        return self.get_axis(Axis.LEFT_TRIGGER)

    def get_right_trigger(self) -> float:
        return self.get_axis(Axis.RIGHT_TRIGGER)

    def get_left_x(self) -> float:
        return self.get_axis(Axis.LEFT_STICK_X)

    def get_right_x(self) -> float:
        return self.get_axis(Axis.RIGHT_STICK_X)

    def get_left_y(self) -> float:
        """Left stick Y, negated when configured via set_negate_y_axis()"""
        return self.get_axis(Axis.LEFT_STICK_Y) * self._y_multiplier

    def get_right_y(self) -> float:
        """Right stick Y, negated when configured via set_negate_y_axis()"""
        return self.get_axis(Axis.RIGHT_STICK_Y) * self._y_multiplier

    # ------------------------------------------------------------------
    # Vertical stick sign convention
    # ------------------------------------------------------------------

    def set_negate_y_axis(self, negate: bool) -> None:
        """
        Negate the stick Y accessors.

        Hardware reports stick-forward as negative; negating turns it into
        a positive "forward" value. Affects get_left_y()/get_right_y() only.
        """
        multiplier = -1 if negate else 1
        if multiplier != self._y_multiplier:
            self._logger.info(f"Stick Y negation {'enabled' if negate else 'disabled'}")
        self._y_multiplier = multiplier

    def is_negating_y_axis(self) -> bool:
        return self._y_multiplier == -1

    # ------------------------------------------------------------------
    # Buffered (edge) access
    # ------------------------------------------------------------------

    def _reader_for(self, channel: Channel) -> KeyReader:
        if isinstance(channel, Button):
            return self._button_readers[channel]
        if isinstance(channel, Axis):
            return self._axis_readers[channel]
        raise ChannelNotFoundError(channel)

    def is_down(self, channel: Channel) -> bool:
        """Button held / axis past its threshold, as of the last poll"""
        return self._reader_for(channel).is_down()

    def was_just_pressed(self, channel: Channel) -> bool:
        """True only on the first poll that saw the channel down"""
        return self._reader_for(channel).was_just_pressed()

    def was_just_released(self, channel: Channel) -> bool:
        """True only on the first poll that saw the channel up again"""
        return self._reader_for(channel).was_just_released()

    def state_just_changed(self, channel: Channel) -> bool:
        return self._reader_for(channel).state_just_changed()

    def get_button_reader(self, button: Button) -> KeyReader:
        if not isinstance(button, Button):
            raise ChannelNotFoundError(button, "Button")
        return self._button_readers[button]

    def get_axis_reader(self, axis: Axis) -> AxisReader:
        if not isinstance(axis, Axis):
            raise ChannelNotFoundError(axis, "Axis")
        return self._axis_readers[axis]

    # ------------------------------------------------------------------
    # Polling
    # ------------------------------------------------------------------

    def poll_buttons(self) -> None:
        """Sample every button reader. Call once per loop tick."""
        for button, reader in self._button_readers.items():
            reader.sample()
            if reader.was_just_pressed():
                self._logger.info(f"Button {button.name} pressed")
            elif reader.was_just_released():
                self._logger.debug(f"Button {button.name} released")

    def poll_axes(self) -> None:
        """Sample every axis reader. Call once per loop tick."""
        for axis, reader in self._axis_readers.items():
            reader.sample()
            if reader.state_just_changed():
                self._logger.debug(
                    f"Axis {axis.name} {'past' if reader.is_down() else 'below'} "
                    f"threshold {reader.threshold}"
                )

    def poll_all(self) -> None:
        """
        Sample all axes, then all buttons.

        Channels are independent; the fixed order only keeps runs
        reproducible.
        """
        self.poll_axes()
        self.poll_buttons()

    # ------------------------------------------------------------------
    # Trigger factories
    # ------------------------------------------------------------------

    def get_gamepad_button(self, button: Button) -> GamepadButton:
        """Shared single-button trigger, created with the reader"""
        if not isinstance(button, Button):
            raise ChannelNotFoundError(button, "Button")
        return self._gamepad_buttons[button]

    def get_gamepad_buttons(self, buttons: Iterable[Button]) -> GamepadButton:
        """New trigger active while all `buttons` are held"""
        return GamepadButton(self, buttons)

    def get_axis_button(self,
                        axes: Iterable[Axis],
                        threshold: Optional[float] = None) -> GamepadAxisButton:
        """New trigger active while all `axes` read >= threshold (default: reader threshold)"""
        if threshold is None:
            threshold = self._axis_threshold
        return GamepadAxisButton(self, threshold, axes)

    def create_toggle_axis_reader(self,
                                  axis: Axis,
                                  threshold: Optional[float] = None) -> ToggleAxisReader:
        """
        New toggle over one of this gamepad's axes.

        The toggle is owned by the caller and is NOT sampled by poll_all();
        call its sample() on the same tick (ControlLoop.add_reader does this).
        """
        if not isinstance(axis, Axis):
            raise ChannelNotFoundError(axis, "Axis")
        if threshold is None:
            threshold = self._axis_readers[axis].threshold
        return ToggleAxisReader(partial(self.get_axis, axis), threshold)

    def cleanup(self) -> None:
        """Release sampler resources"""
        self._sampler.cleanup()
        self._logger.info("GamepadReader cleaned up")
