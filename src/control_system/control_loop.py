"""
Control loop - polls the gamepad once per frame and hands it to listeners
"""

import time
from typing import TYPE_CHECKING, Callable, List, Optional

from utils import OnceInMs

if TYPE_CHECKING:
    from gamepad_system.gamepad_reader import GamepadReader
    from utils import ClassLogger


class ControlLoop:
    """
    Fixed-rate loop that owns the polling cadence.

    Each tick:
    1. gamepad.poll_all()
    2. sample() every extra reader (toggles, readers over triggers)
    3. call every listener with the gamepad

    Everything runs on the calling thread; listeners see a fully
    sampled gamepad and must not poll it themselves.
    """

    def __init__(self,
                 gamepad: 'GamepadReader',
                 logger: 'ClassLogger',
                 frame_duration_ms: int = 20,
                 status_interval_ms: int = 10000):
        """
        Args:
            gamepad: Gamepad reader polled at the start of each tick
            logger: Logger for status and errors
            frame_duration_ms: Target frame duration in milliseconds
            status_interval_ms: Interval between status log lines
        """
        if frame_duration_ms <= 0:
            raise ValueError(f"frame_duration_ms must be positive, got {frame_duration_ms}")

        self.gamepad = gamepad
        self.logger = logger
        self.target_frame_duration = frame_duration_ms / 1000.0
        self.running = False
        self.tick_count = 0

        self._readers: List = []
        self._listeners: List[Callable[['GamepadReader'], None]] = []
        self._status_timer = OnceInMs(status_interval_ms)
        self._overruns = 0

        self.logger.info(f"ControlLoop initialized: {frame_duration_ms}ms frame duration")

    def add_reader(self, reader) -> None:
        """Sample `reader` every tick, right after the gamepad poll"""
        self._readers.append(reader)

    def add_listener(self, listener: Callable[['GamepadReader'], None]) -> None:
        """Call `listener(gamepad)` every tick after all sampling"""
        self._listeners.append(listener)

    def tick(self) -> None:
        """Run one frame: poll, sample extra readers, notify listeners."""
        self.gamepad.poll_all()
        for reader in self._readers:
            reader.sample()
        for listener in self._listeners:
            listener(self.gamepad)

        self.tick_count += 1
        if self._status_timer.should_execute():
            self.logger.debug(f"Tick {self.tick_count}, {self._overruns} frame overruns")

    def run_loop(self, max_ticks: Optional[int] = None) -> None:
        """
        Tick at the target rate until stop() is called or max_ticks is reached.

        KeyboardInterrupt ends the loop quietly; any other error is logged
        and re-raised.
        """
        self.running = True
        self.logger.info(f"Starting control loop with {int(self.target_frame_duration * 1000)}ms frame duration")

        try:
            while self.running:
                if max_ticks is not None and self.tick_count >= max_ticks:
                    break

                frame_start = time.monotonic()
                self.tick()

                frame_duration = time.monotonic() - frame_start
                sleep_time = self.target_frame_duration - frame_duration
                if sleep_time > 0:
                    time.sleep(sleep_time)
                else:
                    self._overruns += 1

        except KeyboardInterrupt:
            self.logger.info("Control loop stopped by user (Ctrl+C)")
        except Exception as e:
            self.logger.error(f"Control loop error: {e}", exception=e)
            self.logger.flush()
            raise
        finally:
            self.stop()

    def stop(self) -> None:
        if self.running:
            self.logger.info(f"Control loop stopped after {self.tick_count} ticks")
        self.running = False
