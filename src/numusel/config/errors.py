"""Typed exceptions for configuration loading.

This module defines specific exception types for different kinds of
configuration errors, making it easier to handle and debug issues.
"""


class ConfigError(Exception):
    """Base exception for all configuration errors."""


class ConfigIncludeError(ConfigError):
    """Raised when a configuration file cannot be found or parsed."""


class ConfigValidationError(ConfigError):
    """Raised when configuration validation fails (e.g. unknown blocks)."""
