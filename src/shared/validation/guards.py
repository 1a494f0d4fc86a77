"""
Argument and state guards shared by the service collection helpers.

Each guard raises on failure and returns nothing on success. Failures
are logged before the error propagates.
"""

from typing import Any

from ...core.entities.service_descriptor import ServiceLifetime
from ..exceptions import (
    ErrorContextManager,
    InvalidServiceArgumentError,
    ReadOnlyServiceCollectionError
)
from ..logging import get_logger

logger = get_logger(__name__)


def require_not_none(value: Any, name: str, operation: str) -> None:
    """
    Reject a missing required argument.

    Args:
        value: Argument value
        name: Parameter name, used in the message
        operation: Calling operation, used in the error context

    Raises:
        InvalidServiceArgumentError: If ``value`` is None
    """
    if value is None:
        raise InvalidServiceArgumentError(
            f"{name} must not be None",
            ErrorContextManager.create_context(operation, argument=name)
        )


def require_callable(value: Any, name: str, operation: str) -> None:
    """Reject a missing or non-callable argument."""
    require_not_none(value, name, operation)
    if not callable(value):
        raise InvalidServiceArgumentError(
            f"{name} must be callable, got {type(value).__name__}",
            ErrorContextManager.create_context(operation, argument=name)
        )


def require_lifetime(value: Any, operation: str) -> None:
    """Reject anything that is not a ServiceLifetime member."""
    require_not_none(value, "lifetime", operation)
    if not isinstance(value, ServiceLifetime):
        raise InvalidServiceArgumentError(
            f"lifetime must be a ServiceLifetime, got {value!r}",
            ErrorContextManager.create_context(operation, argument="lifetime")
        )


def require_writable(services: Any, operation: str, service_type: Any = None) -> None:
    """
    Reject mutation of a read-only collection.

    Args:
        services: Collection about to be mutated
        operation: Calling operation
        service_type: Optional service type being mutated

    Raises:
        ReadOnlyServiceCollectionError: If the collection is read-only
    """
    if services.is_read_only:
        context = ErrorContextManager.create_context(operation, service_type)
        logger.warning(
            "Rejected mutation of read-only service collection",
            **context.to_dict()
        )
        raise ReadOnlyServiceCollectionError("services is read only", context)
