# tesseract_installer/config_loader.py
# -*- coding: utf-8 -*-
"""
Configuration loader for the installer.

Handles loading settings from Pydantic model defaults, environment variables,
and an optional YAML file, applying a specific order of precedence:
1. Pydantic Model Defaults
2. Environment Variables (TESSERACT_INSTALLER_*, via Pydantic's BaseSettings)
3. YAML Configuration File
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from .config import CONFIG_FILE_ENV_VAR, CONFIG_FILE_PATH_DEFAULT
from .config_models import AppSettings

module_logger = logging.getLogger(__name__)


def _deep_update(
    source: Dict[str, Any], overrides: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Recursively updates a dictionary `source` with values from another dictionary
    `overrides`. Nested dictionaries are merged key by key; any other value in
    `overrides` replaces the one in `source` unless it is None.

    Parameters:
        source: Dict[str, Any]
            The dictionary to be updated. This dictionary gets modified in place.
        overrides: Dict[str, Any]
            The dictionary containing values to update or add to the `source`.

    Returns:
        Dict[str, Any]:
            The updated dictionary after applying all `overrides` to the input `source`.
    """
    for key, value in overrides.items():
        if (
            isinstance(value, dict)
            and key in source
            and isinstance(source[key], dict)
        ):
            source[key] = _deep_update(source[key], value)
        elif value is not None:
            source[key] = value
        elif key not in source:
            source[key] = value
    return source


def _read_yaml_settings(
    yaml_config_path: Path, logger_to_use: logging.Logger
) -> Dict[str, Any]:
    """Return the mapping stored in the YAML settings file, or {} if unusable."""
    if not (yaml_config_path.exists() and yaml_config_path.is_file()):
        logger_to_use.info(
            f"Configuration file '{yaml_config_path}' not found. Using defaults and environment variables."
        )
        return {}

    try:
        with open(yaml_config_path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger_to_use.warning(
            f"Could not parse YAML config file '{yaml_config_path}': {e}. Using defaults and environment variables."
        )
        return {}
    except IOError as e:
        logger_to_use.warning(
            f"Could not read config file '{yaml_config_path}': {e}. Using defaults and environment variables."
        )
        return {}

    if yaml_data and isinstance(yaml_data, dict):
        logger_to_use.info(f"Loaded configuration from {yaml_config_path}")
        return yaml_data
    if yaml_data is not None:
        logger_to_use.warning(
            f"Config file '{yaml_config_path}' does not contain a valid YAML dictionary. Ignoring."
        )
    return {}


def load_app_settings(
    config_file_path: Optional[Union[str, Path]] = None,
    current_logger: Optional[logging.Logger] = None,
) -> AppSettings:
    """
    Loads application settings with the following precedence:
    1. Pydantic Model Defaults.
    2. Environment Variables. BaseSettings loads these on instantiation.
    3. Values from the YAML configuration file (highest precedence).

    Args:
        config_file_path: Path to the YAML configuration file. Defaults to
            $TESSERACT_INSTALLER_CONFIG or /etc/tesseract-installer/config.yaml.
        current_logger: Optional logger to use instead of the module logger.

    Returns:
        An instance of AppSettings with the fully resolved configuration.

    Raises:
        SystemExit: If the merged configuration fails validation.
    """
    logger_to_use = current_logger if current_logger else module_logger
    if not config_file_path:
        config_file_path = os.environ.get(
            CONFIG_FILE_ENV_VAR, CONFIG_FILE_PATH_DEFAULT
        )
    yaml_config_path = Path(config_file_path)

    try:
        # Model Defaults < Environment Variables
        settings_after_env_and_defaults = AppSettings()
        current_values_dict = settings_after_env_and_defaults.model_dump(
            exclude_defaults=False
        )

        yaml_data = _read_yaml_settings(yaml_config_path, logger_to_use)
        if yaml_data:
            current_values_dict = _deep_update(current_values_dict, yaml_data)

        final_settings = AppSettings(**current_values_dict)
    except ValidationError as e:
        logger_to_use.error(f"Configuration validation failed: {e}")
        raise SystemExit(f"Configuration error: {e}") from e

    logger_to_use.debug(
        "Successfully loaded and validated application settings"
    )

    return final_settings
