"""Main configuration loading functions.

This module provides the entry points used to load configurations:
- load_config(): Load from a YAML string
- load_config_file(): Load from a file path

A configuration is made of two optional blocks:

.. code-block:: yaml

    base:
      verbosity: info
      iterations: -1
      log_step: 100
    reporter:
      file_name: output_mc.log
      overwrite: true
"""

import os
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigIncludeError, ConfigValidationError

__all__ = ["load_config", "load_config_file"]

# Top-level configuration blocks
CONFIG_BLOCKS = ("base", "reporter")


def _validate(cfg: Any, source: str) -> Dict[str, Any]:
    """Checks that a parsed configuration has the expected structure.

    Parameters
    ----------
    cfg : Any
        Parsed YAML content
    source : str
        Name of the configuration source (for error messages)

    Returns
    -------
    Dict[str, Any]
        Validated configuration dictionary

    Raises
    ------
    ConfigValidationError
        If the configuration is not a dictionary of known blocks
    """
    if cfg is None:
        return {}

    if not isinstance(cfg, dict):
        raise ConfigValidationError(
            f"The configuration in {source} must be a dictionary, "
            f"got {type(cfg).__name__}."
        )

    unknown = [k for k in cfg if k not in CONFIG_BLOCKS]
    if unknown:
        raise ConfigValidationError(
            f"Unknown configuration block(s) in {source}: {unknown}. "
            f"Must be one of {CONFIG_BLOCKS}."
        )

    for key, block in cfg.items():
        if block is not None and not isinstance(block, dict):
            raise ConfigValidationError(
                f"The `{key}` block in {source} must be a dictionary."
            )

    return {k: v if v is not None else {} for k, v in cfg.items()}


def load_config(config_string: str, source: Optional[str] = None) -> Dict[str, Any]:
    """Load a configuration from a YAML string.

    Parameters
    ----------
    config_string : str
        YAML configuration string
    source : str, optional
        Name of the configuration source (for error messages)

    Returns
    -------
    Dict[str, Any]
        Configuration dictionary

    Raises
    ------
    ConfigIncludeError
        If the string cannot be parsed
    ConfigValidationError
        If the configuration structure is not valid
    """
    source = source or "<string>"
    try:
        cfg = yaml.safe_load(config_string)
    except yaml.YAMLError as exc:
        raise ConfigIncludeError(f"Error loading {source}: {exc}") from exc

    return _validate(cfg, source)


def load_config_file(cfg_path: str) -> Dict[str, Any]:
    """Load a configuration from a YAML file.

    Parameters
    ----------
    cfg_path : str
        Path to configuration file

    Returns
    -------
    Dict[str, Any]
        Configuration dictionary

    Raises
    ------
    ConfigIncludeError
        If the file cannot be found or parsed
    ConfigValidationError
        If the configuration structure is not valid
    """
    cfg_path = os.path.abspath(cfg_path)
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            config_string = f.read()
    except FileNotFoundError as exc:
        raise ConfigIncludeError(f"Configuration file not found: {cfg_path}") from exc

    return load_config(config_string, cfg_path)
