"""
Service collection, provider and registration helpers.
"""

from .collection_extensions import (
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
from .lifetime_manager import LifetimeManager
from .service_collection import ServiceCollection
from .service_provider import ServiceProvider

__all__ = [
    'LifetimeManager',
    'ServiceCollection',
    'ServiceProvider',
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
