"""
Configuration manager for centralized configuration handling.

This module provides a manager for loading the YAML configuration of
the helpers, with support for different environments, and the glue
that applies the logging section to the structured logger.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ...shared.logging import LogLevel, StructuredLogger, configure_logging
from .config_validator import ConfigValidator
from .environment_config import EnvironmentConfig


class ConfigManager:
    """
    Manager for application configurations.

    Loads ``base.yaml`` and, when present, ``<environment>.yaml`` from
    the configuration directory, merges them, applies environment
    overrides and validates the result.
    """

    def __init__(
        self,
        config_dir: str = "config",
        environment: Optional[str] = None,
        environ: Optional[Dict[str, str]] = None
    ):
        """
        Initialize the manager.

        Args:
            config_dir: Configuration directory path
            environment: Optional environment name, ``APP_ENV`` by default
            environ: Environment mapping, ``os.environ`` by default
        """
        self._environ = os.environ if environ is None else environ
        self.config_dir = Path(config_dir)
        self.environment = environment or self._environ.get("APP_ENV", "development")
        self.validator = ConfigValidator()
        self._config: Optional[EnvironmentConfig] = None

    def load_config(self) -> EnvironmentConfig:
        """
        Load configuration from files.

        Returns:
            EnvironmentConfig: Loaded configuration

        Raises:
            FileNotFoundError: If ``base.yaml`` is not found
            ValueError: If configuration is invalid
        """
        if self._config is not None:
            return self._config

        base_config = self._load_yaml("base.yaml", required=True)
        env_config = self._load_yaml(f"{self.environment}.yaml", required=False)

        config = EnvironmentConfig(
            self._merge_configs(base_config, env_config),
            environ=self._environ
        )
        self.validator.validate_config(config)

        self._config = config
        return self._config

    def get_config(self) -> EnvironmentConfig:
        """
        Get the current configuration.

        Returns:
            EnvironmentConfig: Current configuration
        """
        return self.load_config()

    def get_logging_config(self) -> Dict[str, Any]:
        """
        Get logging configuration.

        Returns:
            Dict[str, Any]: Logging configuration
        """
        return self.get_config().get("logging", {})

    def _load_yaml(self, filename: str, required: bool) -> Dict[str, Any]:
        """
        Load YAML configuration file.

        Args:
            filename: Configuration file name
            required: Whether a missing file is an error

        Returns:
            Dict[str, Any]: Loaded configuration, empty for an empty file

        Raises:
            FileNotFoundError: If a required file is not found
        """
        file_path = self.config_dir / filename
        if not file_path.exists():
            if required:
                raise FileNotFoundError(f"Configuration file not found: {file_path}")
            return {}

        with open(file_path, "r") as f:
            return yaml.safe_load(f) or {}

    def _merge_configs(
        self,
        base: Dict[str, Any],
        override: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Merge two configurations.

        Args:
            base: Base configuration
            override: Override configuration

        Returns:
            Dict[str, Any]: Merged configuration
        """
        result = base.copy()

        for key, value in override.items():
            if (
                key in result and
                isinstance(result[key], dict) and
                isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result


def configure_logging_from_config(manager: ConfigManager) -> StructuredLogger:
    """
    Configure the package logger from a manager's logging section.

    Args:
        manager: Configuration manager to read from

    Returns:
        StructuredLogger: Configured root logger
    """
    config = manager.get_config()
    output = sys.stderr if config.get_log_output() == "stderr" else sys.stdout
    return configure_logging(
        level=LogLevel.parse(config.get_log_level()),
        output=output
    )
