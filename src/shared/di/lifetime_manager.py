"""
Lifetime manager for dependency injection.

This module provides the lifetime manager that caches service
instances per descriptor and disposes them with their owning
provider or scope.
"""

from typing import Any, Callable, Dict, List

from ...core.entities import ServiceDescriptor


class LifetimeManager:
    """
    Manager for service instance lifecycle.

    One manager belongs to each provider scope. Cached instances are
    keyed by descriptor identity, so two registrations of the same
    service type never share an instance.
    """

    def __init__(self):
        """Initialize lifetime manager."""
        self._instances: Dict[ServiceDescriptor, Any] = {}
        self._disposables: List[Any] = []
        self._disposed = False

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def get_or_create(
        self,
        descriptor: ServiceDescriptor,
        factory: Callable[[], Any]
    ) -> Any:
        """
        Get the cached instance for a descriptor, creating it once.

        Args:
            descriptor: Service descriptor
            factory: Zero-argument factory for the instance

        Returns:
            Any: Cached instance
        """
        if descriptor not in self._instances:
            self._instances[descriptor] = self.track(factory())
        return self._instances[descriptor]

    def track(self, instance: Any) -> Any:
        """
        Track an instance for disposal and return it.

        Args:
            instance: Instance to track
        """
        if hasattr(instance, "dispose"):
            self._disposables.append(instance)
        return instance

    def dispose_all(self) -> None:
        """Dispose tracked instances, most recently created first."""
        if self._disposed:
            return
        self._disposed = True

        for instance in reversed(self._disposables):
            instance.dispose()

        self._instances.clear()
        self._disposables.clear()
