"""
Error context for service collection failures.

This module provides the structured context attached to every error
raised by the service collection helpers, so callers and log sinks
receive the failing operation and service type in a uniform shape.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..logging.log_formatter import LogFormatter


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ErrorContext:
    """
    Structured error context information.

    Captures which operation failed and for which service type,
    together with any additional data supplied at the raise site.
    """

    operation: str = ""
    service_type: Optional[str] = None
    context_data: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error context to dictionary.

        Returns:
            Dict[str, Any]: Dictionary representation
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "operation": self.operation,
            "service_type": self.service_type,
            "context_data": dict(self.context_data)
        }


class ErrorContextManager:
    """Helpers for building and rendering error contexts."""

    @staticmethod
    def create_context(
        operation: str,
        service_type: Any = None,
        **context_data: Any
    ) -> ErrorContext:
        """
        Create error context for a failing operation.

        Args:
            operation: Name of the operation that failed
            service_type: Optional service type involved
            **context_data: Additional context data

        Returns:
            ErrorContext: Created error context
        """
        return ErrorContext(
            operation=operation,
            service_type=(
                LogFormatter.format_type(service_type)
                if service_type is not None else None
            ),
            context_data=context_data
        )

    @staticmethod
    def format_context(context: ErrorContext) -> str:
        """
        Format error context as string.

        Args:
            context: Error context to format

        Returns:
            str: Formatted error context
        """
        parts = [f"Operation: {context.operation}"]

        if context.service_type:
            parts.append(f"Service type: {context.service_type}")

        if context.context_data:
            context_str = ", ".join(
                f"{k}={v}" for k, v in context.context_data.items()
            )
            parts.append(f"Context: {context_str}")

        parts.append(f"Timestamp: {context.timestamp.isoformat()}")
        return "\n".join(parts)
