"""
Registration helpers for service collections.

Convenience functions that check, add, replace and remove service
registrations on an ordered collection of service descriptors.
"""

from .core.entities import ServiceDescriptor, ServiceLifetime
from .core.interfaces import ServiceCollectionInterface, ServiceProviderInterface
from .shared.di import (
    ServiceCollection,
    ServiceProvider,
    add_if_absent,
    add_or_replace,
    add_scoped_if_absent,
    add_singleton_if_absent,
    add_transient_if_absent,
    add_when,
    has_implementation_of,
    is_registered,
    remove_all,
    remove_all_of,
    remove_first,
    remove_where,
    replace_all,
    try_find_descriptor,
    try_get_service
)
from .shared.exceptions import (
    InvalidServiceArgumentError,
    ReadOnlyServiceCollectionError,
    ServiceCollectionError,
    ServiceResolutionError
)

__version__ = "1.0.0"

__all__ = [
    'ServiceDescriptor',
    'ServiceLifetime',
    'ServiceCollectionInterface',
    'ServiceProviderInterface',
    'ServiceCollection',
    'ServiceProvider',
    'InvalidServiceArgumentError',
    'ReadOnlyServiceCollectionError',
    'ServiceCollectionError',
    'ServiceResolutionError',
    'add_if_absent',
    'add_or_replace',
    'add_scoped_if_absent',
    'add_singleton_if_absent',
    'add_transient_if_absent',
    'add_when',
    'has_implementation_of',
    'is_registered',
    'remove_all',
    'remove_all_of',
    'remove_first',
    'remove_where',
    'replace_all',
    'try_find_descriptor',
    'try_get_service'
]
