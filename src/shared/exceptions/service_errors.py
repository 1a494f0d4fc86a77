"""
Error types raised by the service collection helpers.

Two precondition failures exist: a required argument was missing or
malformed, or a mutation was requested on a read-only collection.
Lookups that find nothing report it through their return value, not
through an exception. Resolution failures from the default provider
have their own type.
"""

from typing import Optional

from .error_context import ErrorContext


class ServiceCollectionError(Exception):
    """Base class for all service collection errors."""

    def __init__(self, message: str, context: Optional[ErrorContext] = None):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()

    def to_dict(self):
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "context": self.context.to_dict()
        }


class InvalidServiceArgumentError(ServiceCollectionError, ValueError):
    """A required argument was ``None`` or of the wrong kind."""


class ReadOnlyServiceCollectionError(ServiceCollectionError, RuntimeError):
    """A mutation was requested on a collection flagged read-only."""


class ServiceResolutionError(ServiceCollectionError, LookupError):
    """A required service could not be produced by the provider."""
