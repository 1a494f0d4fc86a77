"""
Tests for service descriptors.
"""

import pytest

from src.core.entities import ServiceDescriptor, ServiceLifetime
from src.shared.exceptions import InvalidServiceArgumentError

from .sample_services import ConsoleLogger, FileLogger, ILogger


class TestServiceDescriptor:
    """Construction rules and identity semantics."""

    def test_type_backed(self):
        descriptor = ServiceDescriptor.describe(ILogger, ConsoleLogger, ServiceLifetime.SCOPED)

        assert descriptor.service_type is ILogger
        assert descriptor.implementation_type is ConsoleLogger
        assert descriptor.implementation_factory is None
        assert descriptor.lifetime == ServiceLifetime.SCOPED

    def test_factory_backed(self):
        factory = lambda provider: ConsoleLogger()  # noqa: E731
        descriptor = ServiceDescriptor.from_factory(ILogger, factory, ServiceLifetime.TRANSIENT)

        assert descriptor.implementation_type is None
        assert descriptor.implementation_factory is factory

    def test_requires_exactly_one_implementation(self):
        with pytest.raises(InvalidServiceArgumentError):
            ServiceDescriptor(ILogger)
        with pytest.raises(InvalidServiceArgumentError):
            ServiceDescriptor(
                ILogger,
                implementation_type=ConsoleLogger,
                implementation_factory=lambda provider: ConsoleLogger()
            )

    def test_rejects_bad_values(self):
        with pytest.raises(InvalidServiceArgumentError):
            ServiceDescriptor.describe(None, ConsoleLogger, ServiceLifetime.SINGLETON)
        with pytest.raises(InvalidServiceArgumentError):
            ServiceDescriptor.describe(ILogger, ConsoleLogger(), ServiceLifetime.SINGLETON)
        with pytest.raises(InvalidServiceArgumentError):
            ServiceDescriptor.describe(ILogger, ConsoleLogger, "scoped")

    def test_is_immutable(self):
        descriptor = ServiceDescriptor.singleton(ILogger, ConsoleLogger)

        with pytest.raises(AttributeError):
            descriptor.implementation_type = FileLogger

    def test_compares_by_identity(self):
        first = ServiceDescriptor.singleton(ILogger, ConsoleLogger)
        second = ServiceDescriptor.singleton(ILogger, ConsoleLogger)

        assert first == first
        assert first != second
        assert len({first, second}) == 2

    @pytest.mark.parametrize("builder, lifetime", [
        (ServiceDescriptor.singleton, ServiceLifetime.SINGLETON),
        (ServiceDescriptor.scoped, ServiceLifetime.SCOPED),
        (ServiceDescriptor.transient, ServiceLifetime.TRANSIENT),
    ])
    def test_lifetime_builders(self, builder, lifetime):
        assert builder(ILogger, ConsoleLogger).lifetime == lifetime
        assert builder(ConsoleLogger).implementation_type is ConsoleLogger
        assert builder(ILogger, lambda p: ConsoleLogger()).implementation_factory is not None

    def test_with_implementation_keeps_lifetime(self):
        original = ServiceDescriptor.scoped(ILogger, ConsoleLogger)

        replacement = original.with_implementation(FileLogger)

        assert replacement is not original
        assert replacement.implementation_type is FileLogger
        assert replacement.lifetime == ServiceLifetime.SCOPED
        assert original.implementation_type is ConsoleLogger

    def test_repr_names_lifetime(self):
        assert "SINGLETON" in repr(ServiceDescriptor.singleton(ILogger, ConsoleLogger))
