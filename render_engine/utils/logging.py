"""
Logging helpers for the render engine.

Modules log through ``logging.getLogger(__name__)``, so every record lands
under the ``render_engine`` logger configured here. ``StageTimer`` measures
the pipeline stages of one render.
"""

import logging
import time
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

from ..core.errors import ConfigError

ROOT_LOGGER_NAME = "render_engine"

CONSOLE_FORMAT = "%(levelname)-7s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"


def level_from_name(name: str) -> int:
    """
    Resolve a configured level name such as ``"info"`` or ``"DEBUG"``.

    Raises:
        ConfigError: If the name is not a standard logging level
    """
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown logging level {name!r}")
    return level


def setup_logging(console_level: str = "INFO",
                  log_file: Optional[str] = None,
                  file_level: str = "DEBUG") -> logging.Logger:
    """
    Configure the ``render_engine`` logger for a command line run.

    Handlers installed by an earlier call are replaced, so calling this
    again with other levels takes effect.

    Args:
        console_level: Level name for stderr output
        log_file: Path of a log file, or None to log to the console only
        file_level: Level name for the log file

    Returns:
        logging.Logger: The configured logger

    Raises:
        ConfigError: If a level name is unknown
    """
    console = level_from_name(console_level)
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in [h for h in logger.handlers if getattr(h, '_render_engine', False)]:
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler()]
    handlers[0].setLevel(console)
    handlers[0].setFormatter(logging.Formatter(CONSOLE_FORMAT))

    level = console
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level_from_name(file_level))
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        handlers.append(file_handler)
        level = min(level, file_handler.level)

    for handler in handlers:
        handler._render_engine = True
        logger.addHandler(handler)
    logger.setLevel(level)

    return logger


def log_exception(logger: logging.Logger, exception: Exception,
                  message: str = "An exception occurred") -> None:
    """
    Log a failure as one error line, with the traceback at DEBUG level.

    Args:
        logger: Logger to use
        exception: Exception to log
        message: What was being attempted
    """
    logger.error(f"{message}: {exception}")
    logger.debug("Traceback:", exc_info=(type(exception), exception, exception.__traceback__))


class StageTimer:
    """
    Wall-clock durations of the named stages of one pipeline run.

    Example:
        timer = StageTimer(logger)
        with timer.stage("layout"):
            ...
        timer.timings  # {'layout': 0.0012}
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.timings: Dict[str, float] = {}

    @contextmanager
    def stage(self, name: str) -> Iterator[None]:
        """Time the enclosed block and record it under ``name``."""
        started = time.perf_counter()
        try:
            yield
        finally:
            self.timings[name] = time.perf_counter() - started
            self.logger.debug(f"{name} took {self.timings[name] * 1000:.2f} ms")

    def total(self) -> float:
        return sum(self.timings.values())

    def summary(self) -> str:
        """One line such as ``parse_html 0.41 ms, layout 1.20 ms (total 1.61 ms)``."""
        stages = ", ".join(f"{name} {seconds * 1000:.2f} ms" for name, seconds in self.timings.items())
        return f"{stages} (total {self.total() * 1000:.2f} ms)"
