"""
Tests for structured logging and error context.
"""

import io
import json
import logging

import pytest

from src.shared.exceptions import (
    ErrorContextManager,
    InvalidServiceArgumentError,
)
from src.shared.logging import (
    ROOT_LOGGER_NAME,
    LogFormatter,
    LogLevel,
    configure_logging,
    get_logger,
)

from .sample_services import ConsoleLogger, ILogger


@pytest.fixture
def root_logger():
    """Restore the package root logger after each test."""
    underlying = logging.getLogger(ROOT_LOGGER_NAME)
    level = underlying.level
    handlers = list(underlying.handlers)
    yield underlying
    underlying.setLevel(level)
    for handler in list(underlying.handlers):
        if handler not in handlers:
            underlying.removeHandler(handler)


class TestStructuredLogger:
    """JSON output and logger configuration."""

    def test_get_logger_nests_under_package_root(self):
        logger = get_logger("some.module")

        assert logger.name == f"{ROOT_LOGGER_NAME}.some.module"
        assert get_logger("some.module") is logger

    def test_emits_json_with_context(self, root_logger):
        stream = io.StringIO()
        configure_logging(level=LogLevel.DEBUG, output=stream)
        logger = get_logger("json.test")
        logger.add_context(component="tests")

        logger.info("Registered", service_type=ILogger, count=1)

        entry = json.loads(stream.getvalue().strip())
        assert entry["level"] == "INFO"
        assert entry["logger"] == f"{ROOT_LOGGER_NAME}.json.test"
        assert entry["message"] == "Registered"
        assert entry["context"] == {
            "component": "tests",
            "service_type": "tests.sample_services.ILogger",
            "count": 1,
        }

    def test_level_gates_output(self, root_logger):
        stream = io.StringIO()
        configure_logging(level=LogLevel.WARNING, output=stream)

        get_logger("gate.test").info("hidden")
        get_logger("gate.test").warning("shown")

        lines = stream.getvalue().strip().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["message"] == "shown"

    def test_configure_attaches_one_handler(self, root_logger):
        before = len(root_logger.handlers)

        configure_logging(output=io.StringIO())
        configure_logging(output=io.StringIO())

        assert len(root_logger.handlers) == before + 1

    def test_get_level_reports_effective_level(self, root_logger):
        logger = configure_logging(level=LogLevel.ERROR, output=io.StringIO())

        assert logger.get_level() == LogLevel.ERROR
        assert get_logger("child").get_level() == LogLevel.ERROR

    def test_exception_entry(self, root_logger):
        stream = io.StringIO()
        configure_logging(level=LogLevel.INFO, output=stream)

        get_logger("exc.test").exception("failed", exc_info=ValueError("boom"))

        entry = json.loads(stream.getvalue().strip())
        assert entry["exception"] == {"type": "ValueError", "message": "boom"}


class TestLogFormatter:
    """Rendering helpers."""

    def test_format_type(self):
        assert LogFormatter.format_type(ILogger) == "tests.sample_services.ILogger"
        assert LogFormatter.format_type(int) == "int"
        assert LogFormatter.format_type("key") == "'key'"

    def test_format_context_makes_values_serialisable(self):
        context = LogFormatter.format_context(
            {"types": [ILogger, ConsoleLogger], "obj": object, "skip": 1},
            exclude_keys={"skip"}
        )

        assert context == {
            "types": ["tests.sample_services.ILogger", "tests.sample_services.ConsoleLogger"],
            "obj": "object",
        }
        json.dumps(context)

    def test_parse_level(self):
        assert LogLevel.parse("debug") is LogLevel.DEBUG
        assert LogLevel.parse(LogLevel.INFO) is LogLevel.INFO
        with pytest.raises(ValueError):
            LogLevel.parse("verbose")


class TestErrorContext:
    """Errors carry structured context."""

    def test_create_context(self):
        context = ErrorContextManager.create_context("add_if_absent", ILogger, argument="lifetime")

        data = context.to_dict()
        assert data["operation"] == "add_if_absent"
        assert data["service_type"] == "tests.sample_services.ILogger"
        assert data["context_data"] == {"argument": "lifetime"}

    def test_format_context(self):
        context = ErrorContextManager.create_context("remove_first", ILogger)

        text = ErrorContextManager.format_context(context)

        assert "Operation: remove_first" in text
        assert "Service type: tests.sample_services.ILogger" in text

    def test_error_to_dict(self):
        error = InvalidServiceArgumentError(
            "services must not be None",
            ErrorContextManager.create_context("is_registered", argument="services")
        )

        assert isinstance(error, ValueError)
        assert error.to_dict()["type"] == "InvalidServiceArgumentError"
        assert error.to_dict()["context"]["operation"] == "is_registered"
