"""
Registration helpers for service collections.

This module provides free functions that check, add, replace and
remove registrations on any ServiceCollectionInterface. The helpers
keep no state between calls. Functions that mutate return the same
collection so calls can be chained.

"First" always means first in registration order. Every mutating
helper checks the read-only flag before touching the collection, so a
rejected call leaves the collection unchanged.
"""

from typing import Any, Callable, List, Optional, Tuple, Type, TypeVar

from ...core.entities import ServiceDescriptor, ServiceLifetime
from ...core.interfaces import ServiceCollectionInterface
from ..exceptions import ErrorContextManager, InvalidServiceArgumentError
from ..logging import get_logger
from ..validation import (
    require_callable,
    require_lifetime,
    require_not_none,
    require_writable
)

T = TypeVar('T')

logger = get_logger(__name__)


def _first(services: ServiceCollectionInterface, service_type: Any) -> Optional[ServiceDescriptor]:
    return next((d for d in services if d.service_type == service_type), None)


def _flatten_types(service_types: Tuple[Any, ...]) -> Tuple[Any, ...]:
    flattened: List[Any] = []
    for item in service_types:
        if isinstance(item, (set, frozenset, list, tuple)):
            flattened.extend(item)
        else:
            flattened.append(item)
    return tuple(flattened)


def _remove_descriptors(
    services: ServiceCollectionInterface,
    descriptors: List[ServiceDescriptor],
    operation: str
) -> None:
    for descriptor in descriptors:
        services.remove(descriptor)
    if descriptors:
        logger.debug(
            "Removed service registrations",
            operation=operation,
            service_types=[d.service_type for d in descriptors],
            removed=len(descriptors)
        )


def is_registered(services: ServiceCollectionInterface, service_type: Any) -> bool:
    """
    Check whether a service type has any registration.

    Only the declared service type is considered, not the lifetime or
    the implementation.

    Args:
        services: Collection to check
        service_type: Service type to look for

    Returns:
        bool: True if at least one registration matches

    Raises:
        InvalidServiceArgumentError: If an argument is None
    """
    require_not_none(services, "services", "is_registered")
    require_not_none(service_type, "service_type", "is_registered")

    return _first(services, service_type) is not None


def try_find_descriptor(
    services: ServiceCollectionInterface,
    service_type: Any
) -> Tuple[Optional[ServiceDescriptor], bool]:
    """
    Find the first registration of a service type.

    Returns:
        Tuple[Optional[ServiceDescriptor], bool]: The descriptor and
        True, or ``(None, False)`` when nothing matches
    """
    require_not_none(services, "services", "try_find_descriptor")
    require_not_none(service_type, "service_type", "try_find_descriptor")

    descriptor = _first(services, service_type)
    return descriptor, descriptor is not None


def try_get_service(
    services: ServiceCollectionInterface,
    service_type: Type[T]
) -> Tuple[Optional[T], bool]:
    """
    Try to resolve a service from a provider built for this call.

    Every call builds a new provider from the whole collection, which
    costs as much as the dependency graph it instantiates. Callers that
    resolve repeatedly should build and keep a provider themselves.
    Errors raised while constructing the service propagate.

    Args:
        services: Collection to build the provider from
        service_type: Type of service to resolve

    Returns:
        Tuple[Optional[T], bool]: The instance and True, or
        ``(None, False)`` when the provider yields nothing
    """
    require_not_none(services, "services", "try_get_service")
    require_not_none(service_type, "service_type", "try_get_service")

    logger.debug(
        "Building temporary service provider",
        service_type=service_type,
        registrations=len(services)
    )
    provider = services.build_service_provider()
    service = provider.get_service(service_type)
    return service, service is not None


def remove_first(services: ServiceCollectionInterface, service_type: Any) -> ServiceCollectionInterface:
    """
    Remove the first registration of a service type.

    Does nothing when the type is not registered.

    Returns:
        ServiceCollectionInterface: ``services`` for chaining

    Raises:
        InvalidServiceArgumentError: If an argument is None
        ReadOnlyServiceCollectionError: If ``services`` is read-only
    """
    require_not_none(services, "services", "remove_first")
    require_not_none(service_type, "service_type", "remove_first")
    require_writable(services, "remove_first", service_type)

    descriptor = _first(services, service_type)
    _remove_descriptors(services, [descriptor] if descriptor is not None else [], "remove_first")
    return services


def remove_all(services: ServiceCollectionInterface, *service_types: Any) -> ServiceCollectionInterface:
    """
    Remove every registration whose service type is one of ``service_types``.

    Types may be passed individually or as sets, lists or tuples, so
    ``remove_all(services, {A, B})`` and ``remove_all(services, A, B)``
    are equivalent.

    Args:
        services: Collection to modify
        *service_types: Service types, or collections of them, to remove

    Returns:
        ServiceCollectionInterface: ``services`` for chaining

    Raises:
        InvalidServiceArgumentError: If ``services`` or any type is None
        ReadOnlyServiceCollectionError: If ``services`` is read-only
    """
    require_not_none(services, "services", "remove_all")
    service_types = _flatten_types(service_types)
    for service_type in service_types:
        require_not_none(service_type, "service_types", "remove_all")
    require_writable(services, "remove_all")

    matches = [d for d in list(services) if d.service_type in service_types]
    _remove_descriptors(services, matches, "remove_all")
    return services


def remove_all_of(services: ServiceCollectionInterface, service_type: Any) -> ServiceCollectionInterface:
    """Remove every registration of a single service type."""
    require_not_none(services, "services", "remove_all_of")
    require_not_none(service_type, "service_type", "remove_all_of")
    require_writable(services, "remove_all_of", service_type)

    matches = [d for d in list(services) if d.service_type == service_type]
    _remove_descriptors(services, matches, "remove_all_of")
    return services


def remove_where(
    services: ServiceCollectionInterface,
    predicate: Callable[[ServiceDescriptor], bool]
) -> ServiceCollectionInterface:
    """
    Remove every registration for which ``predicate`` returns true.

    The predicate sees a snapshot taken before anything is removed, so
    each registration is tested exactly once. Survivors keep their
    relative order.

    Raises:
        InvalidServiceArgumentError: If ``predicate`` is missing or not callable
        ReadOnlyServiceCollectionError: If ``services`` is read-only
    """
    require_not_none(services, "services", "remove_where")
    require_callable(predicate, "predicate", "remove_where")
    require_writable(services, "remove_where")

    matches = [d for d in list(services) if predicate(d)]
    _remove_descriptors(services, matches, "remove_where")
    return services


def add_if_absent(
    services: ServiceCollectionInterface,
    service_type: Any,
    implementation_type: type,
    lifetime: ServiceLifetime
) -> ServiceCollectionInterface:
    """
    Register an implementation unless the service type is already registered.

    Args:
        services: Collection to modify
        service_type: Service type to register
        implementation_type: Class that implements the service
        lifetime: Lifetime of the new registration

    Returns:
        ServiceCollectionInterface: ``services`` for chaining

    Raises:
        InvalidServiceArgumentError: If an argument is None or malformed
        ReadOnlyServiceCollectionError: If ``services`` is read-only
    """
    require_not_none(services, "services", "add_if_absent")
    require_not_none(service_type, "service_type", "add_if_absent")
    require_not_none(implementation_type, "implementation_type", "add_if_absent")
    require_lifetime(lifetime, "add_if_absent")
    require_writable(services, "add_if_absent", service_type)

    if _first(services, service_type) is None:
        services.add(ServiceDescriptor.describe(service_type, implementation_type, lifetime))
        logger.debug(
            "Added service registration",
            service_type=service_type,
            implementation_type=implementation_type,
            lifetime=lifetime.value
        )
    return services


def add_singleton_if_absent(
    services: ServiceCollectionInterface,
    service_type: Any,
    implementation_type: Optional[type] = None
) -> ServiceCollectionInterface:
    """Register a singleton unless the service type is already registered."""
    return add_if_absent(
        services,
        service_type,
        implementation_type or service_type,
        ServiceLifetime.SINGLETON
    )


def add_scoped_if_absent(
    services: ServiceCollectionInterface,
    service_type: Any,
    implementation_type: Optional[type] = None
) -> ServiceCollectionInterface:
    """Register a scoped service unless the service type is already registered."""
    return add_if_absent(
        services,
        service_type,
        implementation_type or service_type,
        ServiceLifetime.SCOPED
    )


def add_transient_if_absent(
    services: ServiceCollectionInterface,
    service_type: Any,
    implementation_type: Optional[type] = None
) -> ServiceCollectionInterface:
    """Register a transient service unless the service type is already registered."""
    return add_if_absent(
        services,
        service_type,
        implementation_type or service_type,
        ServiceLifetime.TRANSIENT
    )


def add_or_replace(
    services: ServiceCollectionInterface,
    service_type: Any,
    implementation_type: type,
    lifetime: ServiceLifetime
) -> ServiceCollectionInterface:
    """
    Replace the first registration of a service type, or add one.

    The new registration is appended at the end of the collection.
    """
    require_not_none(services, "services", "add_or_replace")
    require_not_none(service_type, "service_type", "add_or_replace")
    require_not_none(implementation_type, "implementation_type", "add_or_replace")
    require_lifetime(lifetime, "add_or_replace")
    require_writable(services, "add_or_replace", service_type)

    descriptor = ServiceDescriptor.describe(service_type, implementation_type, lifetime)

    existing = _first(services, service_type)
    if existing is not None:
        services.remove(existing)

    services.add(descriptor)
    logger.debug(
        "Added or replaced service registration",
        service_type=service_type,
        implementation_type=implementation_type,
        lifetime=lifetime.value,
        replaced=existing is not None
    )
    return services


def add_when(
    services: ServiceCollectionInterface,
    service_type: Any,
    condition: Callable[[], bool],
    factory: Callable[[Any], Any],
    lifetime: ServiceLifetime
) -> ServiceCollectionInterface:
    """
    Register a factory only if ``condition`` holds.

    ``condition`` is called once, now. ``factory`` receives the
    resolving provider when the service is eventually resolved.
    """
    require_not_none(services, "services", "add_when")
    require_not_none(service_type, "service_type", "add_when")
    require_callable(condition, "condition", "add_when")
    require_callable(factory, "factory", "add_when")
    require_lifetime(lifetime, "add_when")
    require_writable(services, "add_when", service_type)

    if condition():
        services.add(ServiceDescriptor.from_factory(service_type, factory, lifetime))
        logger.debug(
            "Added conditional service registration",
            service_type=service_type,
            lifetime=lifetime.value
        )
    return services


def replace_all(
    services: ServiceCollectionInterface,
    service_type: Any,
    new_implementation_type: type
) -> ServiceCollectionInterface:
    """
    Point every registration of a service type at a new implementation.

    Each matching registration is removed and a replacement with the
    same lifetime is appended, so replacements keep their relative
    order and end up after all other registrations.
    """
    require_not_none(services, "services", "replace_all")
    require_not_none(service_type, "service_type", "replace_all")
    require_not_none(new_implementation_type, "new_implementation_type", "replace_all")
    require_writable(services, "replace_all", service_type)

    matches = [d for d in list(services) if d.service_type == service_type]
    replacements = [d.with_implementation(new_implementation_type) for d in matches]

    for old, new in zip(matches, replacements):
        services.remove(old)
        services.add(new)

    if matches:
        logger.debug(
            "Replaced service implementations",
            service_type=service_type,
            implementation_type=new_implementation_type,
            replaced=len(matches)
        )
    return services


def has_implementation_of(services: ServiceCollectionInterface, capability: type) -> bool:
    """
    Check whether any registered implementation class satisfies ``capability``.

    Uses ``issubclass``, so ABC registration and runtime-checkable
    protocols count. Factory registrations have no implementation class
    and never match. Unlike ``is_registered`` this ignores the declared
    service type.

    Raises:
        InvalidServiceArgumentError: If ``capability`` is None or cannot
            be used in a subclass check
    """
    require_not_none(services, "services", "has_implementation_of")
    require_not_none(capability, "capability", "has_implementation_of")
    if not isinstance(capability, type):
        raise InvalidServiceArgumentError(
            f"capability must be a class, got {capability!r}",
            ErrorContextManager.create_context("has_implementation_of", argument="capability")
        )

    try:
        return any(
            d.implementation_type is not None and issubclass(d.implementation_type, capability)
            for d in services
        )
    except TypeError as exc:
        raise InvalidServiceArgumentError(
            f"capability does not support subclass checks: {exc}",
            ErrorContextManager.create_context("has_implementation_of", capability)
        ) from exc
