"""
Core interfaces module for service registration.

This module provides the collection and resolver contracts the
registration helpers operate on.
"""

from .service_collection_interface import (
    ServiceCollectionInterface,
    ServiceProviderInterface
)

__all__ = [
    'ServiceCollectionInterface',
    'ServiceProviderInterface'
]
