"""
Core entities module for service registration.

This module provides access to the registration record and lifetime
types used throughout the helpers.
"""

from .service_descriptor import ServiceDescriptor, ServiceLifetime

__all__ = [
    'ServiceDescriptor',
    'ServiceLifetime'
]
