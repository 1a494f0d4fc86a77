"""
Tests for YAML configuration loading.
"""

import logging
import sys

import pytest
import yaml

from src.infrastructure.config import (
    ConfigManager,
    ConfigValidator,
    configure_logging_from_config,
)
from src.shared.logging import ROOT_LOGGER_NAME, LogLevel


def _write(path, data):
    path.write_text(yaml.safe_dump(data))


@pytest.fixture
def config_dir(tmp_path):
    _write(tmp_path / "base.yaml", {"logging": {"level": "INFO", "output": "stdout"}})
    return tmp_path


class TestConfigManager:
    """Loading, merging and overriding configuration."""

    def test_loads_base_config(self, config_dir):
        manager = ConfigManager(str(config_dir), environment="test", environ={})

        assert manager.get_logging_config() == {"level": "INFO", "output": "stdout"}

    def test_environment_file_overrides_base(self, config_dir):
        _write(config_dir / "staging.yaml", {"logging": {"level": "WARNING"}})

        config = ConfigManager(str(config_dir), environment="staging", environ={}).get_config()

        assert config.get_log_level() == "WARNING"
        assert config.get_log_output() == "stdout"

    def test_environment_selected_from_app_env(self, config_dir):
        _write(config_dir / "ci.yaml", {"logging": {"output": "stderr"}})

        manager = ConfigManager(str(config_dir), environ={"APP_ENV": "ci"})

        assert manager.environment == "ci"
        assert manager.get_config().get_log_output() == "stderr"

    def test_environment_variables_win(self, config_dir):
        manager = ConfigManager(
            str(config_dir),
            environment="test",
            environ={"LOG_LEVEL": "debug", "LOG_OUTPUT": "stderr"}
        )

        config = manager.get_config()

        assert config.get_log_level() == "DEBUG"
        assert config.get_log_output() == "stderr"

    def test_missing_base_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigManager(str(tmp_path), environ={}).load_config()

    def test_empty_base_file_uses_defaults(self, tmp_path):
        (tmp_path / "base.yaml").write_text("")

        config = ConfigManager(str(tmp_path), environ={}).get_config()

        assert config.get_log_level() == "INFO"
        assert config.get_log_output() == "stdout"

    def test_invalid_values_are_all_reported(self, tmp_path):
        _write(tmp_path / "base.yaml", {"logging": {"level": "LOUD", "output": "file"}})

        with pytest.raises(ValueError) as exc_info:
            ConfigManager(str(tmp_path), environ={}).load_config()

        message = str(exc_info.value)
        assert "Logging level" in message
        assert "Logging output" in message

    def test_config_is_cached(self, config_dir):
        manager = ConfigManager(str(config_dir), environment="test", environ={})

        assert manager.get_config() is manager.get_config()


class TestConfigValidator:
    """Validation rules."""

    def test_accepts_lowercase_level(self):
        ConfigValidator().validate_config({"logging": {"level": "debug"}})

    def test_rejects_non_mapping_section(self):
        with pytest.raises(ValueError):
            ConfigValidator().validate_config({"logging": "DEBUG"})


class TestConfigureLoggingFromConfig:
    """Applying the logging section to the package logger."""

    def test_applies_level_and_output(self, config_dir):
        underlying = logging.getLogger(ROOT_LOGGER_NAME)
        level, handlers = underlying.level, list(underlying.handlers)
        manager = ConfigManager(
            str(config_dir),
            environment="test",
            environ={"LOG_LEVEL": "ERROR", "LOG_OUTPUT": "stderr"}
        )

        try:
            logger = configure_logging_from_config(manager)

            assert logger.get_level() == LogLevel.ERROR
            structured = [h for h in underlying.handlers if getattr(h, "_structured", False)]
            assert len(structured) == 1
            assert structured[0].stream is sys.stderr
        finally:
            underlying.setLevel(level)
            for handler in list(underlying.handlers):
                if handler not in handlers:
                    underlying.removeHandler(handler)
