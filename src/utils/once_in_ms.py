"""
Timing utility for throttling work inside a fixed-rate loop
"""

import time
from typing import Callable


class OnceInMs:
    """
    Allows an action at most once per interval.

    The control loop ticks every frame (e.g. 20ms) but status lines
    should only be written every few seconds.

    Example:
        status = OnceInMs(10000)

        # In the loop body:
        if status.should_execute():
            logger.info(f"{ticks} ticks so far")
    """

    def __init__(self, interval_ms: int, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            interval_ms: Minimum milliseconds between executions
            clock: Seconds source, monotonic by default
        """
        self.interval_ms = interval_ms
        self._interval_s = interval_ms / 1000.0
        self._clock = clock
        self._last_execution: float = float('-inf')

    def should_execute(self) -> bool:
        """True (and restart the interval) when the interval has passed"""
        now = self._clock()
        if now - self._last_execution >= self._interval_s:
            self._last_execution = now
            return True
        return False

    def reset(self) -> None:
        """Force the next should_execute() to return True"""
        self._last_execution = float('-inf')

    def elapsed_ms(self) -> float:
        """Milliseconds since the last execution"""
        return (self._clock() - self._last_execution) * 1000

    def remaining_ms(self) -> float:
        """Milliseconds until the next execution is allowed (negative if overdue)"""
        return self.interval_ms - self.elapsed_ms()
