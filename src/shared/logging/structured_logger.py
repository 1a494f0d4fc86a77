"""
Structured logger implementation.

This module provides a structured logging implementation that
formats log messages as one JSON object per line on top of the
standard :mod:`logging` machinery.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from .log_formatter import LogFormatter
from .logger_interface import LoggerInterface, LogLevel

ROOT_LOGGER_NAME = "service_collection"

_loggers: Dict[str, "StructuredLogger"] = {}


class StructuredLogger(LoggerInterface):
    """
    Structured logger implementation.

    Each call produces a JSON entry with timestamp, level, logger
    name, message and merged context. Level gating and output are
    delegated to the wrapped :class:`logging.Logger`, so handlers
    configured on the package root logger apply to every module.
    """

    def __init__(self, name: str):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
        """
        self.name = name
        self._context: Dict[str, Any] = {}
        self._logger = logging.getLogger(name)

    def _log(
        self,
        level: LogLevel,
        message: str,
        exc_info: Optional[BaseException] = None,
        **kwargs: Any
    ) -> None:
        if not self._logger.isEnabledFor(level.numeric):
            return

        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level.value,
            "logger": self.name,
            "message": message,
            "context": LogFormatter.format_context({**self._context, **kwargs})
        }

        if exc_info is not None:
            log_entry["exception"] = {
                "type": exc_info.__class__.__name__,
                "message": str(exc_info)
            }

        self._logger.log(level.numeric, json.dumps(log_entry))

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        self._log(LogLevel.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        self._log(LogLevel.ERROR, message, **kwargs)

    def exception(self, message: str, exc_info: BaseException, **kwargs: Any) -> None:
        """Log an error message together with an exception."""
        self._log(LogLevel.ERROR, message, exc_info=exc_info, **kwargs)

    def set_level(self, level: LogLevel) -> None:
        """Set the logging level."""
        self._logger.setLevel(level.numeric)

    def get_level(self) -> LogLevel:
        """Get the effective logging level."""
        effective = self._logger.getEffectiveLevel()
        for level in LogLevel:
            if level.numeric >= effective:
                return level
        return LogLevel.CRITICAL

    def add_context(self, **kwargs: Any) -> None:
        """Add context data."""
        self._context.update(kwargs)

    def clear_context(self) -> None:
        """Clear all context data."""
        self._context.clear()

    def get_context(self) -> Dict[str, Any]:
        """Get the current context data."""
        return self._context.copy()


def get_logger(name: str) -> StructuredLogger:
    """
    Return the cached StructuredLogger for ``name``.

    Module names outside the package root are nested under it so a
    single :func:`configure_logging` call governs all helpers.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name)
    return _loggers[name]


def configure_logging(
    name: str = ROOT_LOGGER_NAME,
    level: LogLevel = LogLevel.INFO,
    output: TextIO = sys.stdout
) -> StructuredLogger:
    """
    Configure and return the package root StructuredLogger.

    A stream handler is attached once; later calls only change the
    level and, if given a different stream, retarget the handler.

    Args:
        name: Logger name
        level: Logging level
        output: Output stream for logs

    Returns:
        StructuredLogger: Configured logger instance
    """
    logger = get_logger(name)
    underlying = logging.getLogger(logger.name)

    handler = next(
        (h for h in underlying.handlers if getattr(h, "_structured", False)),
        None
    )
    if handler is None:
        handler = logging.StreamHandler(output)
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler._structured = True
        underlying.addHandler(handler)
    elif handler.stream is not output:
        handler.setStream(output)

    logger.set_level(level)
    return logger
