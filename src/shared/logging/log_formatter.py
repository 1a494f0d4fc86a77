"""
Log formatter for consistent message formatting.

This module provides utilities for rendering service types and
log context in a consistent way across the helpers.
"""

from typing import Any, Dict, Optional


class LogFormatter:
    """
    Log formatter for consistent message formatting.

    This class provides methods for formatting log messages
    and their context in a consistent way.
    """

    @staticmethod
    def format_type(service_type: Any) -> str:
        """
        Render a service type as a qualified name.

        Args:
            service_type: Type (or any other key) to render

        Returns:
            str: ``module.QualName`` for classes, ``repr`` otherwise
        """
        if isinstance(service_type, type):
            module = service_type.__module__
            if module == "builtins":
                return service_type.__qualname__
            return f"{module}.{service_type.__qualname__}"
        return repr(service_type)

    @staticmethod
    def format_context(
        context: Dict[str, Any],
        exclude_keys: Optional[set] = None
    ) -> Dict[str, Any]:
        """
        Make context data JSON friendly.

        Types are rendered with ``format_type``; values that are not
        JSON scalars or containers are rendered with ``repr``.

        Args:
            context: Context data to format
            exclude_keys: Optional set of keys to exclude

        Returns:
            Dict[str, Any]: Formatted context
        """
        exclude_keys = exclude_keys or set()
        return {
            k: LogFormatter._format_value(v)
            for k, v in context.items()
            if k not in exclude_keys
        }

    @staticmethod
    def _format_value(value: Any) -> Any:
        if value is None or isinstance(value, (str, int, float, bool)):
            return value
        if isinstance(value, type):
            return LogFormatter.format_type(value)
        if isinstance(value, (list, tuple, set, frozenset)):
            return [LogFormatter._format_value(v) for v in value]
        if isinstance(value, dict):
            return {str(k): LogFormatter._format_value(v) for k, v in value.items()}
        return repr(value)
