"""
Service registration records.

This module contains the lifetime enumeration and the immutable
descriptor that binds a service type to an implementation type or a
factory.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from ...shared.exceptions import ErrorContextManager, InvalidServiceArgumentError


class ServiceLifetime(Enum):
    """Service lifetime options."""

    SINGLETON = "singleton"  # Single instance for the provider
    SCOPED = "scoped"        # Single instance per scope
    TRANSIENT = "transient"  # New instance per request


@dataclass(frozen=True, eq=False)
class ServiceDescriptor:
    """
    Registration of a service type.

    Exactly one of ``implementation_type`` and ``implementation_factory``
    is set. Descriptors compare by identity, so removing one record never
    removes an identical-looking sibling. Replacing a registration always
    means removing the old descriptor and adding a new one.

    Factories are called with the resolving provider as their only
    argument.
    """

    service_type: Any
    implementation_type: Optional[type] = None
    implementation_factory: Optional[Callable[[Any], Any]] = None
    lifetime: ServiceLifetime = ServiceLifetime.TRANSIENT

    def __post_init__(self):
        if self.service_type is None:
            raise InvalidServiceArgumentError(
                "service_type must not be None",
                ErrorContextManager.create_context("ServiceDescriptor", argument="service_type")
            )

        has_type = self.implementation_type is not None
        has_factory = self.implementation_factory is not None
        if has_type == has_factory:
            raise InvalidServiceArgumentError(
                "exactly one of implementation_type and implementation_factory is required",
                ErrorContextManager.create_context("ServiceDescriptor", self.service_type)
            )
        if has_type and not isinstance(self.implementation_type, type):
            raise InvalidServiceArgumentError(
                f"implementation_type must be a class, got {self.implementation_type!r}",
                ErrorContextManager.create_context("ServiceDescriptor", self.service_type)
            )
        if has_factory and not callable(self.implementation_factory):
            raise InvalidServiceArgumentError(
                "implementation_factory must be callable",
                ErrorContextManager.create_context("ServiceDescriptor", self.service_type)
            )
        if not isinstance(self.lifetime, ServiceLifetime):
            raise InvalidServiceArgumentError(
                f"lifetime must be a ServiceLifetime, got {self.lifetime!r}",
                ErrorContextManager.create_context("ServiceDescriptor", self.service_type)
            )

    @classmethod
    def describe(
        cls,
        service_type: Any,
        implementation_type: type,
        lifetime: ServiceLifetime
    ) -> "ServiceDescriptor":
        """Build a type-backed descriptor."""
        return cls(
            service_type=service_type,
            implementation_type=implementation_type,
            lifetime=lifetime
        )

    @classmethod
    def from_factory(
        cls,
        service_type: Any,
        factory: Callable[[Any], Any],
        lifetime: ServiceLifetime
    ) -> "ServiceDescriptor":
        """Build a factory-backed descriptor."""
        return cls(
            service_type=service_type,
            implementation_factory=factory,
            lifetime=lifetime
        )

    @classmethod
    def singleton(cls, service_type: Any, implementation: Any = None) -> "ServiceDescriptor":
        """
        Build a singleton descriptor.

        Args:
            service_type: Type of service being registered
            implementation: Implementation class or factory; defaults to
                ``service_type`` itself

        Returns:
            ServiceDescriptor: New descriptor
        """
        return cls._for_lifetime(service_type, implementation, ServiceLifetime.SINGLETON)

    @classmethod
    def scoped(cls, service_type: Any, implementation: Any = None) -> "ServiceDescriptor":
        """Build a scoped descriptor."""
        return cls._for_lifetime(service_type, implementation, ServiceLifetime.SCOPED)

    @classmethod
    def transient(cls, service_type: Any, implementation: Any = None) -> "ServiceDescriptor":
        """Build a transient descriptor."""
        return cls._for_lifetime(service_type, implementation, ServiceLifetime.TRANSIENT)

    @classmethod
    def _for_lifetime(
        cls,
        service_type: Any,
        implementation: Any,
        lifetime: ServiceLifetime
    ) -> "ServiceDescriptor":
        if implementation is None:
            implementation = service_type

        if isinstance(implementation, type):
            return cls.describe(service_type, implementation, lifetime)
        return cls.from_factory(service_type, implementation, lifetime)

    def with_implementation(self, implementation_type: type) -> "ServiceDescriptor":
        """Return a new descriptor for the same service and lifetime."""
        return ServiceDescriptor.describe(self.service_type, implementation_type, self.lifetime)

    def __repr__(self) -> str:
        implementation = self.implementation_type or self.implementation_factory
        return (
            f"ServiceDescriptor(service_type={self.service_type!r}, "
            f"implementation={implementation!r}, lifetime={self.lifetime.name})"
        )
