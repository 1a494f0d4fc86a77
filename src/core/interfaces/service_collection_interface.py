"""
Service collection interface definitions.

This module defines the contract a host collection and its resolver
must satisfy for the registration helpers to operate on them. Any
container that can enumerate, append and remove descriptors, report a
read-only flag and build a resolver can be used with the helpers.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional, Type, TypeVar

from ..entities import ServiceDescriptor

T = TypeVar('T')


class ServiceProviderInterface(ABC):
    """Interface for a resolver built from a fixed set of registrations."""

    @abstractmethod
    def get_service(self, service_type: Type[T]) -> Optional[T]:
        """
        Resolve a service instance.

        Args:
            service_type: Type of service to resolve

        Returns:
            Optional[T]: Resolved instance, or None if nothing is registered
        """
        pass


class ServiceCollectionInterface(ABC):
    """
    Interface for an ordered, mutable collection of service descriptors.

    Iteration yields descriptors in registration order. Implementations
    own their storage and any thread safety.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[ServiceDescriptor]:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def add(self, descriptor: ServiceDescriptor) -> Any:
        """
        Append a descriptor.

        Raises:
            ReadOnlyServiceCollectionError: If the collection is read-only
        """
        pass

    @abstractmethod
    def remove(self, descriptor: ServiceDescriptor) -> bool:
        """
        Remove one descriptor by identity.

        Returns:
            bool: True if the descriptor was present and removed

        Raises:
            ReadOnlyServiceCollectionError: If the collection is read-only
        """
        pass

    @property
    @abstractmethod
    def is_read_only(self) -> bool:
        """Whether the collection rejects further mutation."""
        pass

    @abstractmethod
    def make_read_only(self) -> None:
        """Flag the collection read-only. The flag cannot be cleared."""
        pass

    @abstractmethod
    def build_service_provider(self) -> ServiceProviderInterface:
        """
        Build a resolver from the current registrations.

        Returns:
            ServiceProviderInterface: New provider
        """
        pass
