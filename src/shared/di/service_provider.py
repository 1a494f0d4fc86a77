"""
Default service provider.

This module provides the resolver built by ServiceCollection. It
produces instances from a snapshot of registrations, injecting
constructor dependencies from their type annotations.
"""

import inspect
from typing import Any, Callable, Dict, Iterable, List, Optional, Set, Type, TypeVar, get_type_hints

from ...core.entities import ServiceDescriptor, ServiceLifetime
from ...core.interfaces import ServiceProviderInterface
from ..exceptions import ErrorContextManager, ServiceResolutionError
from ..logging import LogFormatter, get_logger
from .lifetime_manager import LifetimeManager

T = TypeVar('T')

logger = get_logger(__name__)


class ServiceProvider(ServiceProviderInterface):
    """
    Resolver over a fixed set of service descriptors.

    When several descriptors share a service type, ``get_service``
    uses the last one registered and ``get_services`` returns all of
    them in registration order. Singletons live in the root provider;
    scoped instances live in the scope that created them (the root
    provider acts as its own scope); transients are always new.

    Transients that define ``dispose`` are tracked by the provider that
    resolved them and released only when that provider is disposed.
    Resolving such transients from a long-lived root keeps every one of
    them alive until the root is disposed, so resolve them from a scope.
    """

    def __init__(
        self,
        descriptors: Iterable[ServiceDescriptor],
        parent: Optional["ServiceProvider"] = None
    ):
        """
        Initialize the provider.

        Args:
            descriptors: Registrations to resolve from; copied on entry
            parent: Root provider when this instance is a scope
        """
        if parent is None:
            self._by_type: Dict[Any, List[ServiceDescriptor]] = {}
            for descriptor in descriptors:
                self._by_type.setdefault(descriptor.service_type, []).append(descriptor)
            self._root = self
        else:
            self._by_type = parent._by_type
            self._root = parent._root

        self._lifetime_manager = LifetimeManager()
        self._resolving: Set[ServiceDescriptor] = set()

    @property
    def is_root(self) -> bool:
        return self._root is self

    def get_service(self, service_type: Type[T]) -> Optional[T]:
        """
        Resolve a service instance.

        Args:
            service_type: Type of service to resolve

        Returns:
            Optional[T]: Resolved instance, or None if not registered
        """
        if service_type in (ServiceProvider, ServiceProviderInterface):
            return self

        descriptors = self._by_type.get(service_type)
        if not descriptors:
            return None
        return self._resolve(descriptors[-1])

    def get_required_service(self, service_type: Type[T]) -> T:
        """
        Resolve a service instance that must be registered.

        Raises:
            ServiceResolutionError: If the service type is not registered
        """
        service = self.get_service(service_type)
        if service is None:
            raise ServiceResolutionError(
                f"No service registered for {LogFormatter.format_type(service_type)}",
                ErrorContextManager.create_context("get_required_service", service_type)
            )
        return service

    def get_services(self, service_type: Type[T]) -> List[T]:
        """Resolve every registration of a service type, in order."""
        return [self._resolve(d) for d in self._by_type.get(service_type, [])]

    def create_scope(self) -> "ServiceProvider":
        """
        Create a new scope.

        Returns:
            ServiceProvider: Scoped provider sharing this provider's root
        """
        return ServiceProvider((), parent=self._root)

    def dispose(self) -> None:
        """Dispose all instances owned by this provider or scope."""
        self._lifetime_manager.dispose_all()

    def __enter__(self) -> "ServiceProvider":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.dispose()

    def _resolve(self, descriptor: ServiceDescriptor) -> Any:
        # Singletons and their dependencies always come from the root.
        if descriptor.lifetime == ServiceLifetime.SINGLETON and not self.is_root:
            return self._root._resolve(descriptor)

        if self._lifetime_manager.is_disposed:
            raise ServiceResolutionError(
                "Cannot resolve from a disposed provider",
                ErrorContextManager.create_context("resolve", descriptor.service_type)
            )

        if descriptor in self._resolving:
            raise ServiceResolutionError(
                f"Circular dependency detected for {LogFormatter.format_type(descriptor.service_type)}",
                ErrorContextManager.create_context("resolve", descriptor.service_type)
            )

        factory = self._create_factory(descriptor)

        self._resolving.add(descriptor)
        try:
            if descriptor.lifetime == ServiceLifetime.TRANSIENT:
                return self._lifetime_manager.track(factory())
            return self._lifetime_manager.get_or_create(descriptor, factory)
        finally:
            self._resolving.discard(descriptor)

    def _create_factory(self, descriptor: ServiceDescriptor) -> Callable[[], Any]:
        if descriptor.implementation_factory is not None:
            return lambda: descriptor.implementation_factory(self)
        return lambda: self._create_instance(descriptor.implementation_type)

    def _create_instance(self, implementation_type: type) -> Any:
        """
        Create instance of implementation type.

        Annotated constructor parameters are resolved from this
        provider. A parameter that cannot be resolved keeps its default
        when it has one.

        Raises:
            ServiceResolutionError: If a required parameter cannot be resolved
        """
        constructor = implementation_type.__init__
        signature = inspect.signature(constructor)
        type_hints = get_type_hints(constructor)

        positional = []
        dependencies = {}
        for name, parameter in list(signature.parameters.items())[1:]:
            if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
                continue

            param_type = type_hints.get(name)
            dependency = self.get_service(param_type) if param_type is not None else None

            if dependency is None and parameter.default is not inspect.Parameter.empty:
                # Positional-only parameters cannot be skipped.
                if parameter.kind == parameter.POSITIONAL_ONLY:
                    positional.append(parameter.default)
            elif dependency is None:
                raise ServiceResolutionError(
                    f"Cannot resolve parameter {name!r} of "
                    f"{LogFormatter.format_type(implementation_type)}",
                    ErrorContextManager.create_context(
                        "create_instance",
                        implementation_type,
                        parameter=name,
                        parameter_type=param_type
                    )
                )
            elif parameter.kind == parameter.POSITIONAL_ONLY:
                positional.append(dependency)
            else:
                dependencies[name] = dependency

        logger.debug(
            "Creating service instance",
            implementation_type=implementation_type,
            dependencies=sorted(dependencies),
            positional=len(positional)
        )
        return implementation_type(*positional, **dependencies)
