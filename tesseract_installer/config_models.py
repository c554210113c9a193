# tesseract_installer/config_models.py
# -*- coding: utf-8 -*-
"""
Pydantic models for application configuration.

This module defines the structured settings for the installer,
including defaults, type annotations, and descriptions.
It utilizes Pydantic for data validation and settings management.
"""

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tesseract_installer.config import (
    DATABASE_ADDRESS_TOKEN_DEFAULT,
    LOG_PREFIX_DEFAULT,
    SCHEMA_DIR_NAME_DEFAULT,
    SCHEMA_PATH_TOKEN_DEFAULT,
    SERVICE_FILE_PATH_DEFAULT,
    SERVICE_NAME_DEFAULT,
    SERVICE_USER_DEFAULT,
    SYMBOLS_DEFAULT,
    USERADD_OPTIONS_DEFAULT,
)


class AppSettings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_prefix="TESSERACT_INSTALLER_",
        extra="ignore",
    )

    service_user: str = Field(default=SERVICE_USER_DEFAULT,
                              description="System account the service runs as.")
    useradd_options: List[str] = Field(default_factory=lambda: list(USERADD_OPTIONS_DEFAULT),
                                       description="Extra options passed to useradd when creating the account.")
    service_name: str = Field(default=SERVICE_NAME_DEFAULT,
                              description="systemd unit name used in the completion guidance.")
    service_file_path: Path = Field(default=SERVICE_FILE_PATH_DEFAULT,
                                    description="Installed service definition file to patch.")
    database_address_token: str = Field(default=DATABASE_ADDRESS_TOKEN_DEFAULT,
                                        description="Default database address literal in the service file.")
    schema_path_token: str = Field(default=SCHEMA_PATH_TOKEN_DEFAULT,
                                   description="Schema filename literal in the service file.")
    schema_dir_name: str = Field(default=SCHEMA_DIR_NAME_DEFAULT,
                                 description="Directory under $HOME holding the default schema file.")
    log_prefix: str = Field(default=LOG_PREFIX_DEFAULT,
                            description="Prefix for log messages from the installer.")
    log_file: Optional[Path] = Field(default=None,
                                     description="Optional path for JSON-structured log output.")

    symbols: Dict[str, str] = Field(default_factory=lambda: dict(SYMBOLS_DEFAULT))
