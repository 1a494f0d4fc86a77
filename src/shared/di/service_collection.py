"""
Default service collection.

This module provides the list-backed collection of service
descriptors that the registration helpers operate on.
"""

from typing import Any, Iterable, Iterator, Optional

from ...core.entities import ServiceDescriptor
from ...core.interfaces import ServiceCollectionInterface
from ..exceptions import ErrorContextManager, InvalidServiceArgumentError
from ..validation import require_not_none, require_writable
from .service_provider import ServiceProvider


class ServiceCollection(ServiceCollectionInterface):
    """
    Ordered, mutable collection of service descriptors.

    Registration order is preserved and significant: helpers that
    look for "the" registration of a type use the first match, while
    the provider resolves the last. Once ``make_read_only`` has been
    called every mutation raises ``ReadOnlyServiceCollectionError``.

    The collection is not thread-safe.
    """

    def __init__(self, descriptors: Optional[Iterable[ServiceDescriptor]] = None):
        """
        Initialize the collection.

        Args:
            descriptors: Optional initial registrations, added in order
        """
        self._descriptors: list = []
        self._read_only = False
        for descriptor in descriptors or ():
            self.add(descriptor)

    def __iter__(self) -> Iterator[ServiceDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __getitem__(self, index: int) -> ServiceDescriptor:
        return self._descriptors[index]

    def __contains__(self, descriptor: object) -> bool:
        return any(d is descriptor for d in self._descriptors)

    def __repr__(self) -> str:
        state = ", read_only" if self._read_only else ""
        return f"ServiceCollection({len(self._descriptors)} registrations{state})"

    @property
    def is_read_only(self) -> bool:
        return self._read_only

    def make_read_only(self) -> None:
        self._read_only = True

    def add(self, descriptor: ServiceDescriptor) -> "ServiceCollection":
        """
        Append a descriptor.

        Args:
            descriptor: Registration to append

        Returns:
            ServiceCollection: Self for method chaining
        """
        require_not_none(descriptor, "descriptor", "add")
        if not isinstance(descriptor, ServiceDescriptor):
            raise InvalidServiceArgumentError(
                f"descriptor must be a ServiceDescriptor, got {type(descriptor).__name__}",
                ErrorContextManager.create_context("add", argument="descriptor")
            )
        require_writable(self, "add", descriptor.service_type)

        self._descriptors.append(descriptor)
        return self

    def remove(self, descriptor: ServiceDescriptor) -> bool:
        """
        Remove one descriptor by identity.

        Returns:
            bool: True if the descriptor was found and removed
        """
        require_not_none(descriptor, "descriptor", "remove")
        require_writable(self, "remove", getattr(descriptor, "service_type", None))

        for index, existing in enumerate(self._descriptors):
            if existing is descriptor:
                del self._descriptors[index]
                return True
        return False

    def add_singleton(self, service_type: Any, implementation: Any = None) -> "ServiceCollection":
        """
        Register a singleton service.

        Args:
            service_type: Type of service being registered
            implementation: Implementation class or factory taking the
                provider; defaults to ``service_type``

        Returns:
            ServiceCollection: Self for method chaining
        """
        return self.add(ServiceDescriptor.singleton(service_type, implementation))

    def add_scoped(self, service_type: Any, implementation: Any = None) -> "ServiceCollection":
        """Register a scoped service."""
        return self.add(ServiceDescriptor.scoped(service_type, implementation))

    def add_transient(self, service_type: Any, implementation: Any = None) -> "ServiceCollection":
        """Register a transient service."""
        return self.add(ServiceDescriptor.transient(service_type, implementation))

    def build_service_provider(self) -> ServiceProvider:
        """
        Build a provider from a snapshot of the current registrations.

        Later changes to the collection are not seen by the provider.
        Building does not make the collection read-only.
        """
        return ServiceProvider(list(self._descriptors))
