"""
Composite triggers - boolean predicates built from gamepad channels
"""

from typing import TYPE_CHECKING, Callable, Iterable, Optional, Tuple

from .errors import ChannelNotFoundError, validate_threshold
from .gamepad_keys import Axis, Button

if TYPE_CHECKING:
    from .gamepad_reader import GamepadReader


class Trigger:
    """
    Boolean condition queried once per loop tick by a command layer.

    Either pass a condition callable or subclass and override get().
    Triggers hold no state of their own: get() re-evaluates every time.

    A trigger wrapping ToggleAxisReader.get_state (e.g.
    Trigger(toggle.get_state)) is the one exception: each get() may flip
    the toggle.
    """

    def __init__(self, condition: Optional[Callable[[], bool]] = None):
        self._condition = condition

    def get(self) -> bool:
        if self._condition is None:
            return False
        return bool(self._condition())

    def and_(self, other: 'Trigger') -> 'Trigger':
        return Trigger(lambda: self.get() and other.get())

    def or_(self, other: 'Trigger') -> 'Trigger':
        return Trigger(lambda: self.get() or other.get())

    def negate(self) -> 'Trigger':
        return Trigger(lambda: not self.get())


class GamepadButton(Trigger):
    """
    Active while every listed button is held.

    Reads the gamepad's immediate button values, not the buffered edge
    state, so it has no pressed/released semantics of its own. An empty
    button list is always active.

    Example:
        intake = GamepadButton(pad, [Button.LEFT_BUMPER, Button.A])
        if intake.get():
            run_intake()
    """

    def __init__(self, gamepad: 'GamepadReader', buttons: Iterable[Button]):
        super().__init__()
        self._gamepad = gamepad
        self._buttons: Tuple[Button, ...] = tuple(buttons)
        for button in self._buttons:
            if not isinstance(button, Button):
                raise ChannelNotFoundError(button, "Button")

    @property
    def buttons(self) -> Tuple[Button, ...]:
        return self._buttons

    def get(self) -> bool:
        return all(self._gamepad.get_button(button) for button in self._buttons)

    def __repr__(self) -> str:
        names = ", ".join(button.name for button in self._buttons)
        return f"GamepadButton([{names}])"


class GamepadAxisButton(Trigger):
    """
    Active while every listed axis reads at or above the threshold.

    The comparison is signed (value >= threshold), so on sticks only the
    positive direction activates. An empty axis list is always active.
    """

    def __init__(self, gamepad: 'GamepadReader', threshold: float, axes: Iterable[Axis]):
        super().__init__()
        self._gamepad = gamepad
        self._threshold = validate_threshold(threshold)
        self._axes: Tuple[Axis, ...] = tuple(axes)
        for axis in self._axes:
            if not isinstance(axis, Axis):
                raise ChannelNotFoundError(axis, "Axis")

    @property
    def axes(self) -> Tuple[Axis, ...]:
        return self._axes

    @property
    def threshold(self) -> float:
        return self._threshold

    def get(self) -> bool:
        return all(self._gamepad.get_axis(axis) >= self._threshold for axis in self._axes)

    def __repr__(self) -> str:
        names = ", ".join(axis.name for axis in self._axes)
        return f"GamepadAxisButton([{names}], threshold={self._threshold})"
