"""
Hybrid logger - per-class loggers on top of one named main logger
"""

import logging
import sys
import traceback
from contextlib import suppress
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, TextIO


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output and brackets format"""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[94m',    # Blue
        'INFO': '\033[92m',     # Green
        'WARNING': '\033[93m',  # Yellow
        'ERROR': '\033[91m',    # Red
        'CRITICAL': '\033[95m', # Magenta
        'RESET': '\033[0m'
    }

    def __init__(self, use_colors: bool = False):
        self.use_colors = use_colors
        # Format: [time] [level] [class] message
        super().__init__('[%(asctime)s] [%(levelname)s] [%(class_name)s] %(message)s')

    def format(self, record: logging.LogRecord) -> str:
        # Records from plain loggers have no class name
        if not hasattr(record, 'class_name'):
            record.class_name = 'Main'

        formatted = super().format(record)
        if self.use_colors:
            color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
            formatted = f"{color}{formatted}{self.COLORS['RESET']}"
        return formatted


class ClassLogger:
    """
    Per-class logger wrapper with its own level filter.

    Every record goes through the shared main logger, tagged with the
    class name so the formatter can print it.
    """

    def __init__(self, main_logger: logging.Logger, class_name: str, level: int):
        self.main_logger = main_logger
        self.class_name = class_name
        self.level = level

    def is_enabled_for(self, level: int) -> bool:
        return level >= self.level

    def _log(self, level: int, message: str, exc_info: bool = False) -> None:
        if not self.is_enabled_for(level):
            return
        self.main_logger.log(
            level, message,
            exc_info=exc_info,
            extra={'class_name': self.class_name},
        )

    def debug(self, message: str) -> None:
        self._log(logging.DEBUG, message)

    def info(self, message: str) -> None:
        self._log(logging.INFO, message)

    def warning(self, message: str) -> None:
        self._log(logging.WARNING, message)

    def error(self, message: str, exception: Optional[BaseException] = None) -> None:
        """Log error message, appending type and location of `exception` when given"""
        if exception is None:
            self._log(logging.ERROR, message)
            return

        exc_type = type(exception).__name__
        tb = traceback.extract_tb(exception.__traceback__)
        filename, lineno = (tb[-1].filename, tb[-1].lineno) if tb else ("unknown", 0)
        self._log(
            logging.ERROR,
            f"{message} | Type: {exc_type} | File: {filename} | Line: {lineno}",
            exc_info=True,
        )

    def critical(self, message: str) -> None:
        self._log(logging.CRITICAL, message)

    def flush(self) -> None:
        """Flush every handler of the main logger"""
        for handler in self.main_logger.handlers:
            handler.flush()


class HybridLogger:
    """
    Logger factory with per-class logging and colored console output.

    A timestamped log file is written under `log_dir`; pass `log_dir=None`
    for console-only logging (tests, short-lived tools).

    Example:
        with HybridLogger("gamepad", log_dir=None) as hybrid:
            logger = hybrid.get_class_logger("GamepadReader", logging.DEBUG)
            logger.info("ready")
    """

    def __init__(self,
                 name: str = "app",
                 log_dir: Optional[str] = "logs",
                 console_stream: Optional[TextIO] = None):
        self.name = name
        self.log_dir = log_dir
        self.log_file: Optional[Path] = None
        self.main_logger = logging.getLogger(name)
        self.class_loggers: Dict[str, ClassLogger] = {}
        self._setup_main_logger(console_stream or sys.stdout)

    def _setup_main_logger(self, console_stream: TextIO) -> None:
        """Attach console handler, and file handler when a log directory is set"""
        self.main_logger.setLevel(logging.DEBUG)
        self.main_logger.handlers.clear()

        console_handler = logging.StreamHandler(console_stream)
        console_handler.setFormatter(ColoredFormatter(use_colors=True))
        self.main_logger.addHandler(console_handler)

        if self.log_dir is not None:
            Path(self.log_dir).mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime('%Y-%m-%d_%H-%M-%S')
            self.log_file = Path(self.log_dir) / f"{self.name}_{timestamp}.log"
            file_handler = logging.FileHandler(self.log_file, encoding="utf-8")
            file_handler.setFormatter(ColoredFormatter(use_colors=False))
            self.main_logger.addHandler(file_handler)

    def get_class_logger(self, class_name: str, level: int = logging.INFO) -> ClassLogger:
        """
        Get (or create) the logger for a class.

        Args:
            class_name: Name printed in the [class] column
            level: Minimum level for this class (only used on first creation)

        Returns:
            ClassLogger: Shared instance for `class_name`
        """
        if class_name not in self.class_loggers:
            self.class_loggers[class_name] = ClassLogger(self.main_logger, class_name, level)
        return self.class_loggers[class_name]

    def get_main_logger(self, level: int = logging.INFO) -> ClassLogger:
        """Convenience accessor for the class logger named "Main" """
        return self.get_class_logger("Main", level)

    def cleanup(self) -> None:
        """Flush and close all handlers"""
        for handler in self.main_logger.handlers:
            with suppress(OSError, ValueError):
                handler.flush()
                handler.close()
        self.main_logger.handlers.clear()

    def __enter__(self) -> 'HybridLogger':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()
