"""
Exceptions module for service collection errors.
"""

from .error_context import ErrorContext, ErrorContextManager
from .service_errors import (
    ServiceCollectionError,
    InvalidServiceArgumentError,
    ReadOnlyServiceCollectionError,
    ServiceResolutionError
)

__all__ = [
    'ErrorContext',
    'ErrorContextManager',
    'ServiceCollectionError',
    'InvalidServiceArgumentError',
    'ReadOnlyServiceCollectionError',
    'ServiceResolutionError'
]
