"""Configuration loading system.

Main Entry Points
-----------------
load_config : Load a configuration from a YAML string
load_config_file : Load a configuration from a YAML file
"""

from .errors import ConfigError, ConfigIncludeError, ConfigValidationError
from .load import load_config, load_config_file

__all__ = [
    "load_config",
    "load_config_file",
    "ConfigError",
    "ConfigIncludeError",
    "ConfigValidationError",
]
