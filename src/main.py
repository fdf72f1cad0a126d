#!/usr/bin/env python3
"""
Gamepad demo - edge events, a toggle and a chord trigger on a real controller

Environment overrides: see GamepadConfig.from_env()
"""

from control_system import ControlLoop
from drive_system import IDriveTrain, Vector2d, drive_with_vector
from gamepad_system import Axis, Button, GamepadConfig, GamepadReader
from gamepad_system.pygame_sampler import PygameGamepadSampler
from utils import HybridLogger


class LoggingDriveTrain(IDriveTrain):
    """Stand-in drivetrain that logs what it would do"""

    def __init__(self, logger):
        self.logger = logger

    def drive_robot_centric(self, strafe_speed: float, forward_speed: float, turn_speed: float) -> None:
        self.logger.debug(f"drive strafe={strafe_speed:+.2f} forward={forward_speed:+.2f} turn={turn_speed:+.2f}")


def runMain():
    config = GamepadConfig.from_env()
    main_logger = HybridLogger("Gamepad", log_dir=config.log_dir)
    logger = main_logger.get_main_logger(config.log_level_value)
    gamepad = None

    try:
        logger.info("Gamepad demo started")

        sampler = PygameGamepadSampler(
            main_logger.get_class_logger("PygameGamepadSampler", config.log_level_value),
            index=config.joystick_index,
            triggers_full_range=config.triggers_full_range,
        )
        gamepad = GamepadReader(
            sampler,
            main_logger.get_class_logger("GamepadReader", config.log_level_value),
            axis_threshold=config.axis_threshold,
            negate_y_axis=config.negate_y_axis,
        )
        loop = ControlLoop(
            gamepad,
            main_logger.get_class_logger("ControlLoop", config.log_level_value),
            frame_duration_ms=config.frame_duration_ms,
            status_interval_ms=config.status_interval_ms,
        )
        drive_train = LoggingDriveTrain(main_logger.get_class_logger("DriveTrain", config.log_level_value))

        slow_mode = gamepad.create_toggle_axis_reader(Axis.LEFT_TRIGGER, threshold=0.5)
        loop.add_reader(slow_mode)
        boost = gamepad.get_gamepad_buttons([Button.LEFT_BUMPER, Button.RIGHT_BUMPER])

        def on_tick(pad: GamepadReader) -> None:
            if pad.was_just_pressed(Button.START):
                logger.info("START pressed - stopping")
                loop.stop()
                return

            slow = slow_mode.get_state()
            if slow_mode.reader.was_just_released():
                logger.info(f"Slow mode {'on' if slow else 'off'}")

            scale = 0.3 if slow else 1.0
            if boost.get():
                scale *= 2.0
            drive_with_vector(
                drive_train,
                Vector2d(pad.get_left_x() * scale, pad.get_left_y() * scale),
                turn_speed=pad.get_right_x(),
            )

        loop.add_listener(on_tick)
        loop.run_loop()

    except KeyboardInterrupt:
        logger.info("Received shutdown signal (Ctrl+C)")

    finally:
        if gamepad is not None:
            gamepad.cleanup()
        logger.info("Gamepad demo stopped")
        main_logger.cleanup()


if __name__ == "__main__":
    runMain()
