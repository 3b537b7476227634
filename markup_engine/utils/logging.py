"""
Logging utility module for the markup engine.
"""

import logging
import os
import sys
import time
from contextlib import contextmanager
from datetime import datetime
from typing import Dict, Iterator, Optional

LOGGER_NAME = "markup_engine"

# Define logging levels dictionary for easy reference
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}


class LogFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    COLORS = {
        'RESET': '\033[0m',
        'RED': '\033[31m',
        'GREEN': '\033[32m',
        'YELLOW': '\033[33m',
        'BLUE': '\033[34m',
        'BOLD': '\033[1m'
    }

    LEVEL_COLORS = {
        'DEBUG': COLORS['BLUE'],
        'INFO': COLORS['GREEN'],
        'WARNING': COLORS['YELLOW'],
        'ERROR': COLORS['RED'],
        'CRITICAL': COLORS['RED'] + COLORS['BOLD']
    }

    def __init__(self, colored: bool = True, *args, **kwargs):
        """
        Initialize formatter.

        Args:
            colored: Whether to color the level name
            *args: Additional formatter args
            **kwargs: Additional formatter kwargs
        """
        self.colored = colored and sys.platform != 'win32'
        super().__init__(*args, **kwargs)

    def format(self, record: logging.LogRecord) -> str:
        formatted_msg = super().format(record)

        if self.colored and record.levelname in self.LEVEL_COLORS:
            colored_level = f"{self.LEVEL_COLORS[record.levelname]}{record.levelname}{self.COLORS['RESET']}"
            formatted_msg = formatted_msg.replace(f"[{record.levelname}]", f"[{colored_level}]", 1)

        return formatted_msg


def _level(name: Optional[str], fallback: int) -> int:
    if not name:
        return fallback
    return LOG_LEVELS.get(name.upper(), fallback)


def setup_logging(log_file: Optional[str] = None,
                  console_level: str = "WARNING",
                  file_level: str = "DEBUG",
                  component: Optional[str] = None) -> logging.Logger:
    """
    Set up logging for the markup engine.

    Calling this again on an already configured logger re-applies the
    levels and adds a file handler if one is requested and missing.

    Args:
        log_file: Path to log file (None for no file logging)
        console_level: Console logging level
        file_level: File logging level
        component: Optional component name for the logger

    Returns:
        logging.Logger: Configured logger
    """
    logger_name = LOGGER_NAME
    if component:
        logger_name = f"{logger_name}.{component}"

    logger = logging.getLogger(logger_name)

    console_lvl = _level(console_level, logging.WARNING)
    file_lvl = _level(file_level, logging.DEBUG)

    console_handler = None
    file_handler = None
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler):
            file_handler = handler
        elif isinstance(handler, logging.StreamHandler):
            console_handler = handler

    if console_handler is None:
        console_handler = logging.StreamHandler()
        console_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        console_handler.setFormatter(LogFormatter(colored=sys.stderr.isatty(),
                                                  fmt=console_format, datefmt='%H:%M:%S'))
        logger.addHandler(console_handler)
    console_handler.setLevel(console_lvl)

    if log_file and file_handler is None:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_format = ("%(asctime)s [%(levelname)s] %(name)s "
                       "(%(filename)s:%(lineno)d): %(message)s")
        file_handler.setFormatter(logging.Formatter(file_format, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)
    if file_handler is not None:
        file_handler.setLevel(file_lvl)

    # The logger passes everything its most verbose handler wants
    levels = [console_lvl] + ([file_lvl] if file_handler is not None else [])
    logger.setLevel(min(levels))

    return logger


def get_default_log_file() -> str:
    """
    Get the default log file path.

    Returns:
        str: ~/.markup_engine/logs/markup_engine_YYYY-MM-DD.log
    """
    log_dir = os.path.join(os.path.expanduser("~"), ".markup_engine", "logs")
    date_str = datetime.now().strftime("%Y-%m-%d")
    return os.path.join(log_dir, f"markup_engine_{date_str}.log")


def log_exception(logger: logging.Logger, exception: BaseException,
                  message: str = "An exception occurred") -> None:
    """
    Log an exception with its traceback.

    Args:
        logger: Logger to use
        exception: Exception to log
        message: Message to log with the exception
    """
    exc_info = (type(exception), exception, exception.__traceback__)
    logger.error(f"{message}: {exception}", exc_info=exc_info)


class PerformanceLogger:
    """Utility class for logging how long named operations take."""

    def __init__(self, logger: logging.Logger, component: str):
        """
        Initialize performance logger.

        Args:
            logger: Logger to use
            component: Component name prefixed to every message
        """
        self.logger = logger
        self.component = component
        self.start_times: Dict[str, float] = {}

    def start(self, name: str) -> None:
        self.start_times[name] = time.perf_counter()

    def end(self, name: str, level: str = "DEBUG") -> float:
        """
        End timing an operation and log the duration.

        Args:
            name: Operation name
            level: Log level

        Returns:
            float: Duration in seconds, 0 if the operation was never started
        """
        started = self.start_times.pop(name, None)
        if started is None:
            self.logger.warning(f"No start time found for {name}")
            return 0.0

        duration = time.perf_counter() - started
        self.log(name, duration, level)
        return duration

    def log(self, name: str, duration: float, level: str = "DEBUG") -> None:
        self.logger.log(_level(level, logging.DEBUG),
                        f"{self.component} {name} took {duration:.4f} seconds")

    @contextmanager
    def measure(self, name: str, level: str = "DEBUG") -> Iterator[None]:
        """Time the body of a ``with`` block, logging even when it raises."""
        self.start(name)
        try:
            yield
        finally:
            self.end(name, level)

    def clear(self) -> None:
        """Clear all start times."""
        self.start_times.clear()
