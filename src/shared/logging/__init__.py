"""
Structured logging for the service collection helpers.
"""

from .log_formatter import LogFormatter
from .logger_interface import LoggerInterface, LogLevel
from .structured_logger import (
    ROOT_LOGGER_NAME,
    StructuredLogger,
    configure_logging,
    get_logger
)

__all__ = [
    'LogFormatter',
    'LoggerInterface',
    'LogLevel',
    'ROOT_LOGGER_NAME',
    'StructuredLogger',
    'configure_logging',
    'get_logger'
]
