"""
Configuration validator for validating configuration values.

This module provides a validator for ensuring configuration values
meet the required format and constraints.
"""

from typing import Any, Dict, List

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_OUTPUTS = ["stdout", "stderr"]


class ConfigValidator:
    """
    Validator for configuration values.

    Collects every problem before raising, so one run reports them all.
    """

    def __init__(self):
        """Initialize the validator."""
        self.errors: List[str] = []

    def validate_config(self, config: Dict[str, Any]) -> None:
        """
        Validate configuration.

        Args:
            config: Configuration to validate

        Raises:
            ValueError: If configuration is invalid
        """
        self.errors = []

        if not isinstance(config, dict):
            raise ValueError("Configuration must be a mapping")

        if "logging" in config:
            if isinstance(config["logging"], dict):
                self._validate_logging_config(config["logging"])
            else:
                self.errors.append("Logging configuration must be a mapping")

        if self.errors:
            raise ValueError("\n".join(self.errors))

    def _validate_logging_config(self, config: Dict[str, Any]) -> None:
        """
        Validate logging configuration.

        Args:
            config: Logging configuration
        """
        if "level" in config:
            level = config["level"]
            if not isinstance(level, str) or level.upper() not in VALID_LEVELS:
                self.errors.append(
                    f"Logging level must be one of: {', '.join(VALID_LEVELS)}"
                )

        if "output" in config:
            output = config["output"]
            if output not in VALID_OUTPUTS:
                self.errors.append(
                    f"Logging output must be one of: {', '.join(VALID_OUTPUTS)}"
                )
