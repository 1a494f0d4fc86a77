"""
Test configuration and fixtures for the service collection helpers.
"""

import logging

import pytest

from src.core.entities import ServiceDescriptor, ServiceLifetime
from src.shared.di import ServiceCollection
from src.shared.logging import ROOT_LOGGER_NAME

from .sample_services import (
    ConsoleLogger,
    FileLogger,
    ICache,
    IClock,
    ILogger,
    MemoryCache,
    SystemClock,
)


@pytest.fixture
def services() -> ServiceCollection:
    """An empty, writable collection."""
    return ServiceCollection()


@pytest.fixture
def populated_services() -> ServiceCollection:
    """
    Collection with a multi-bound logger, a clock and a cache.

    Order: ILogger/Console (singleton), IClock/System (transient),
    ILogger/File (scoped), ICache/Memory (singleton).
    """
    return ServiceCollection([
        ServiceDescriptor.describe(ILogger, ConsoleLogger, ServiceLifetime.SINGLETON),
        ServiceDescriptor.describe(IClock, SystemClock, ServiceLifetime.TRANSIENT),
        ServiceDescriptor.describe(ILogger, FileLogger, ServiceLifetime.SCOPED),
        ServiceDescriptor.describe(ICache, MemoryCache, ServiceLifetime.SINGLETON),
    ])


@pytest.fixture
def read_only_services(populated_services) -> ServiceCollection:
    """The populated collection, flagged read-only."""
    populated_services.make_read_only()
    return populated_services


@pytest.fixture
def debug_logging(caplog):
    """Capture DEBUG records from the package loggers."""
    caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER_NAME)
    return caplog
