"""
Environment configuration for environment-specific settings.

This module wraps a loaded configuration and applies overrides taken
from environment variables.
"""

import os
from typing import Any, Dict, Optional


class EnvironmentConfig(dict):
    """
    Environment-specific configuration.

    Behaves as the merged configuration mapping, with ``LOG_LEVEL`` and
    ``LOG_OUTPUT`` from the environment taking precedence over files.
    """

    def __init__(self, config: Dict[str, Any], environ: Optional[Dict[str, str]] = None):
        """
        Initialize the configuration.

        Args:
            config: Merged file configuration
            environ: Environment mapping, ``os.environ`` by default
        """
        super().__init__(config)
        self._environ = os.environ if environ is None else environ
        self._apply_environment_overrides()

    def _apply_environment_overrides(self) -> None:
        """Apply environment variable overrides to configuration."""
        log_config = self.get("logging") or {}
        if not isinstance(log_config, dict):
            return
        log_config = dict(log_config)

        if "LOG_LEVEL" in self._environ:
            log_config["level"] = self._environ["LOG_LEVEL"]

        if "LOG_OUTPUT" in self._environ:
            log_config["output"] = self._environ["LOG_OUTPUT"]

        self["logging"] = log_config

    def get_log_level(self) -> str:
        """
        Get logging level.

        Returns:
            str: Logging level name, upper case
        """
        return str(self["logging"].get("level", "INFO")).upper()

    def get_log_output(self) -> str:
        """Get the logging stream name (``stdout`` or ``stderr``)."""
        return self["logging"].get("output", "stdout")
