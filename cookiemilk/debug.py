"""
debug.py - Debug and logging functionality for the Cookies & Milk engine

Every part of the engine logs through the shared ``debug`` instance, tagging each
message with its component (board, detector, random, game, session, env, cli) so
that a single component can be singled out from the command line.
"""

import logging
import sys
import time
from contextlib import contextmanager
from enum import Enum
from typing import Iterable, Iterator, Optional, Set

LOGGER_NAME = "cookiemilk"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class DebugLevel(Enum):
    NONE = 0
    WARNING = 1
    INFO = 2
    DEBUG = 3
    TRACE = 4


# TRACE rides on logging.DEBUG with a prefix; NONE sits above every real level
LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 10,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: logging.DEBUG,
}


class Stopwatch:
    """Elapsed time of a ``DebugManager.timed`` block, set when the block exits."""

    def __init__(self, name: str):
        self.name = name
        self.elapsed: Optional[float] = None


class DebugManager:
    """Component-tagged logging on top of the ``cookiemilk`` logger."""

    def __init__(self):
        self._level = DebugLevel.WARNING
        self._components: Set[str] = set()  # empty means every component
        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(LEVEL_MAP[self._level])
        if not self._logger.handlers:
            console = logging.StreamHandler(sys.stderr)
            console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
            self._logger.addHandler(console)

    @property
    def level(self) -> DebugLevel:
        return self._level

    def configure(self, level: Optional[DebugLevel] = None,
                  log_file: Optional[str] = None,
                  components: Optional[Iterable[str]] = None) -> None:
        """
        Configure the debug manager settings.

        Args:
            level: Most verbose level to emit
            log_file: Also write records to this path; "" stops file logging
            components: Only emit messages tagged with these (empty for all)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if log_file is not None:
            for handler in [h for h in self._logger.handlers if isinstance(h, logging.FileHandler)]:
                self._logger.removeHandler(handler)
                handler.close()
            if log_file:
                file_handler = logging.FileHandler(log_file)
                file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
                self._logger.addHandler(file_handler)

        if components is not None:
            self._components = set(components)

    def set_from_string(self, level_str: str) -> DebugLevel:
        """
        Set the level from its name, as given on the command line.

        Raises:
            ValueError: if ``level_str`` names no level
        """
        try:
            level = DebugLevel[level_str.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown debug level: {level_str!r}") from None
        self.configure(level=level)
        return level

    def log(self, level: DebugLevel, message: str, component: Optional[str] = None) -> None:
        if level == DebugLevel.NONE or level.value > self._level.value:
            return
        if component and self._components and component not in self._components:
            return

        if component:
            message = f"[{component}] {message}"
        if level == DebugLevel.TRACE:
            message = f"TRACE: {message}"
        self._logger.log(LEVEL_MAP[level], message)

    def warning(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.TRACE, message, component)

    @contextmanager
    def timed(self, name: str, component: Optional[str] = None) -> Iterator[Stopwatch]:
        """
        Time the enclosed block and log the result at DEBUG.

        Each block gets its own Stopwatch, so concurrent blocks with the same
        name do not interfere.
        """
        watch = Stopwatch(name)
        start = time.perf_counter()
        try:
            yield watch
        finally:
            watch.elapsed = time.perf_counter() - start
            self.debug(f"Performance [{name}]: {watch.elapsed:.6f} seconds", component)


# Create a singleton instance
debug = DebugManager()
