"""Level-filtered logger used by the transporter and its registry."""

from __future__ import annotations

import logging
from typing import Any, Literal

LogLevel = Literal["trace", "debug", "info", "warn", "error"]

LOGGER_NAME = "apiapi_transporter"

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

_LEVELS: dict[LogLevel, int] = {
    "trace": TRACE_LEVEL,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

_METHOD_NAMES = {
    TRACE_LEVEL: "trace",
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warn",
    logging.ERROR: "error",
}


class BoundLogger:
    """Filters by a transporter-level threshold before handing off to the wrapped logger.

    The wrapped object is normally a ``logging.Logger``; any object exposing
    ``trace``/``debug``/``info``/``warn``/``error`` methods works too.
    """

    def __init__(self, logger: Any | None = None, *, level: LogLevel = "info") -> None:
        self._logger = logger or _default_logger()
        self._level = level
        self._threshold = _LEVELS[level]

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(TRACE_LEVEL, msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, *args, **kwargs)

    def warn(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, *args, **kwargs)

    def child(self, name: str) -> "BoundLogger":
        """Namespace under the wrapped logger, e.g. ``apiapi_transporter.http``."""
        if isinstance(self._logger, logging.Logger):
            base = self._logger.getChild(name)
        else:
            base = self._logger
        return BoundLogger(base, level=self._level)

    def _log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        if level < self._threshold:
            return
        try:
            if hasattr(self._logger, "log"):
                self._logger.log(level, msg, *args, **kwargs)
                return
            handler = getattr(self._logger, _METHOD_NAMES[level], None)
            if handler:
                handler(msg, *args, **kwargs)
        except Exception:
            # A broken logger must not mask the transfer result
            pass


def _default_logger() -> logging.Logger:
    # Library default: silent unless the application configures logging.
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


def create_logger(*, logger: Any | None = None, level: LogLevel = "info") -> BoundLogger:
    if isinstance(logger, BoundLogger):
        return logger
    return BoundLogger(logger, level=level)


__all__ = ["BoundLogger", "LOGGER_NAME", "LogLevel", "TRACE_LEVEL", "create_logger"]
