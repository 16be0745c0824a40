"""Level-filtered logging wrapper with a TRACE level and named children."""

from __future__ import annotations

import logging
from typing import Any, Literal

LogLevel = Literal["trace", "debug", "info", "warn", "error"]

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

DEFAULT_LOGGER_NAME = "simple_http_helper"

# Ordered from most to least verbose; maps onto stdlib level numbers.
LOG_LEVELS: dict[LogLevel, int] = {
    "trace": TRACE_LEVEL,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class BoundLogger:
    """Filters records by a level name before handing them to a logger.

    The wrapped object is usually a ``logging.Logger``; any object exposing
    ``debug``/``info``/``warn``/``error`` methods works as well.
    """

    def __init__(self, logger: Any | None = None, *, level: LogLevel = "info") -> None:
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        self._logger = logger or _default_logger()
        self._level = level

    @property
    def level(self) -> LogLevel:
        return self._level

    def is_enabled(self, level: LogLevel) -> bool:
        return LOG_LEVELS[level] >= LOG_LEVELS[self._level]

    def trace(self, msg: str, *args: Any) -> None:
        self._log("trace", msg, *args)

    def debug(self, msg: str, *args: Any) -> None:
        self._log("debug", msg, *args)

    def info(self, msg: str, *args: Any) -> None:
        self._log("info", msg, *args)

    def warn(self, msg: str, *args: Any) -> None:
        self._log("warn", msg, *args)

    def error(self, msg: str, *args: Any) -> None:
        self._log("error", msg, *args)

    def child(self, name: str) -> "BoundLogger":
        if isinstance(self._logger, logging.Logger):
            return BoundLogger(self._logger.getChild(name), level=self._level)
        return BoundLogger(self._logger, level=self._level)

    def emit(self, level: LogLevel, msg: str, *args: Any) -> None:
        """Log regardless of the configured level."""
        try:
            if isinstance(self._logger, logging.Logger):
                self._logger.log(LOG_LEVELS[level], msg, *args)
                return
            handler = getattr(self._logger, level, None)
            if handler is None and level == "trace":
                handler = getattr(self._logger, "debug", None)
            if handler is not None:
                handler(msg, *args)
        except Exception:
            # Logging must never break a request
            pass

    def _log(self, level: LogLevel, msg: str, *args: Any) -> None:
        if self.is_enabled(level):
            self.emit(level, msg, *args)


def _default_logger() -> logging.Logger:
    logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(TRACE_LEVEL)
    return logger


def create_logger(*, logger: Any | None = None, level: LogLevel = "info") -> BoundLogger:
    if isinstance(logger, BoundLogger):
        return logger
    return BoundLogger(logger, level=level)


__all__ = ["BoundLogger", "LOG_LEVELS", "LogLevel", "TRACE_LEVEL", "create_logger"]
