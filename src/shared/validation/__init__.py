"""
Argument and state validation for the service collection helpers.
"""

from .guards import (
    require_callable,
    require_lifetime,
    require_not_none,
    require_writable
)

__all__ = [
    'require_callable',
    'require_lifetime',
    'require_not_none',
    'require_writable'
]
