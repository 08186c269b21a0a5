"""Engine and application loggers with a ring buffer of recent messages."""

from __future__ import annotations

import logging
import sys
from collections import deque

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

ENGINE_LOGGER_NAME = "MAPO"
APP_LOGGER_NAME = "APP^"
RING_BUFFER_CAPACITY = 5

_LEVEL_NAMES = {
    TRACE: "trace",
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "critical",
}


class _PatternFormatter(logging.Formatter):
    """Formats records as ``name [level] (file:line) - message``."""

    def __init__(self) -> None:
        super().__init__("%(name)s [%(short_level)s] (%(filename)s:%(lineno)d) - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        record.short_level = _LEVEL_NAMES.get(record.levelno, record.levelname.lower())
        return super().format(record)


class _ConsoleHandler(logging.Handler):
    """Writes to whatever ``sys.stdout`` is at the time of each record."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stream = sys.stdout
            stream.write(self.format(record) + "\n")
            stream.flush()
        except Exception:
            self.handleError(record)


class RingBufferHandler(logging.Handler):
    """Keeps the most recent formatted records in memory."""

    def __init__(self, capacity: int = RING_BUFFER_CAPACITY) -> None:
        super().__init__()
        self._messages: deque[str] = deque(maxlen=capacity)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._messages.append(self.format(record))
        except Exception:
            self.handleError(record)

    def last_formatted(self, count: int = 0) -> list[str]:
        """Return up to ``count`` latest messages, oldest first; 0 means all."""
        messages = list(self._messages)
        if 0 < count < len(messages):
            return messages[-count:]
        return messages


_ring_buffer: RingBufferHandler | None = None


def _configure(logger: logging.Logger, handlers: list[logging.Handler]) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(TRACE)
    logger.propagate = False


def init_logging() -> None:
    """Set up the engine and application loggers; safe to call again."""
    global _ring_buffer
    formatter = _PatternFormatter()
    _ring_buffer = RingBufferHandler(RING_BUFFER_CAPACITY)
    _ring_buffer.setFormatter(formatter)
    console = _ConsoleHandler()
    console.setFormatter(formatter)
    for name in (ENGINE_LOGGER_NAME, APP_LOGGER_NAME):
        _configure(logging.getLogger(name), [console, _ring_buffer])


def get_engine_logger() -> logging.Logger:
    """Return the logger used by the engine."""
    return logging.getLogger(ENGINE_LOGGER_NAME)


def get_app_logger() -> logging.Logger:
    """Return the logger used by applications."""
    return logging.getLogger(APP_LOGGER_NAME)


def get_last_message() -> str:
    """Return the most recent message logged by either logger, or ''."""
    if _ring_buffer is None:
        raise RuntimeError("logging has not been initialised")
    last = _ring_buffer.last_formatted(1)
    return last[0] if last else ""