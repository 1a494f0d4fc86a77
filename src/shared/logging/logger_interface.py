"""
Logger interface for standardized logging.

This module defines the interface for logging implementations,
ensuring consistent logging behavior across the helpers.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict


class LogLevel(Enum):
    """Standard log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def numeric(self) -> int:
        """Numeric level as understood by :mod:`logging`."""
        return getattr(logging, self.value)

    @classmethod
    def parse(cls, value: Any) -> "LogLevel":
        """
        Parse a level name (case-insensitive) or pass a LogLevel through.

        Raises:
            ValueError: If the name is not a known level
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f"Unknown log level: {value!r}") from None


class LoggerInterface(ABC):
    """
    Interface for logging implementations.

    This abstract class defines the contract that all logging
    implementations must follow.
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """
        Log a debug message.

        Args:
            message: The message to log
            **kwargs: Additional context data
        """
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        pass

    @abstractmethod
    def set_level(self, level: LogLevel) -> None:
        """
        Set the logging level.

        Args:
            level: The log level to set
        """
        pass

    @abstractmethod
    def get_level(self) -> LogLevel:
        """
        Get the current logging level.

        Returns:
            LogLevel: The current log level
        """
        pass

    @abstractmethod
    def add_context(self, **kwargs: Any) -> None:
        """
        Add context data to all subsequent log messages.

        Args:
            **kwargs: Context data to add
        """
        pass

    @abstractmethod
    def get_context(self) -> Dict[str, Any]:
        """
        Get the current context data.

        Returns:
            Dict[str, Any]: Current context data
        """
        pass
