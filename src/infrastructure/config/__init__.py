"""
YAML configuration for the service collection helpers.
"""

from .config_manager import ConfigManager, configure_logging_from_config
from .config_validator import ConfigValidator
from .environment_config import EnvironmentConfig

__all__ = [
    'ConfigManager',
    'ConfigValidator',
    'EnvironmentConfig',
    'configure_logging_from_config'
]
