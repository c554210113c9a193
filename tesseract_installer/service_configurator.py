# tesseract_installer/service_configurator.py
# -*- coding: utf-8 -*-
"""
Handles configuration of an installed tesseract-olap service: the service
account, the database address and schema path in the systemd unit file, and
the guidance printed once setup is done.
"""

import logging
from pathlib import Path
from typing import List, Optional

from tesseract_installer.cli_handler import Prompter
from tesseract_installer.common.command_utils import get_symbols, log_installer
from tesseract_installer.common.file_utils import replace_token_in_file
from tesseract_installer.common.system_utils import (
    ensure_system_user,
    get_home_directory,
    systemd_unit_command,
)
from tesseract_installer.config_models import AppSettings
from tesseract_installer.step_executor import HALT, Step

module_logger = logging.getLogger(__name__)


def default_schema_path(app_settings: AppSettings) -> Path:
    """$HOME/<schema_dir_name>/<schema_path_token>, e.g. ~/tesseract-schema/schema.json."""
    return (
        get_home_directory()
        / app_settings.schema_dir_name
        / app_settings.schema_path_token
    )


def ensure_service_user_step(
    app_settings: AppSettings,
    prompter: Prompter,
    current_logger: Optional[logging.Logger] = None,
) -> None:
    """Create the service account unless it already exists."""
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)

    log_installer(
        f"{symbols.get('step', '➡️')} Setting up system user '{app_settings.service_user}' for {app_settings.service_name}...",
        "info",
        logger_to_use,
        app_settings,
    )
    ensure_system_user(app_settings, logger_to_use)


def confirm_configuration_step(
    app_settings: AppSettings,
    prompter: Prompter,
    current_logger: Optional[logging.Logger] = None,
):
    """Ask the operator to go on; anything but yes ends the run cleanly."""
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)

    if prompter.confirm(
        f"Configure {app_settings.service_file_path} now?"
    ):
        return None

    log_installer(
        f"{symbols.get('info', 'ℹ️')} Configuration declined. {app_settings.service_file_path} was not changed.",
        "info",
        logger_to_use,
        app_settings,
    )
    return HALT


def configure_database_address_step(
    app_settings: AppSettings,
    prompter: Prompter,
    current_logger: Optional[logging.Logger] = None,
) -> None:
    """
    Keep the default database address, or replace every occurrence of it in
    the service file with an address entered by the operator. The address is
    not validated.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    default_address = app_settings.database_address_token

    if prompter.confirm(f"Use default database address {default_address}?"):
        log_installer(
            f"{symbols.get('info', 'ℹ️')} Using default database address {default_address}.",
            "info",
            logger_to_use,
            app_settings,
        )
        return

    address = prompter.ask("Database address (host:port)")
    replace_token_in_file(
        app_settings.service_file_path,
        default_address,
        address,
        app_settings,
        logger_to_use,
    )


def configure_schema_path_step(
    app_settings: AppSettings,
    prompter: Prompter,
    current_logger: Optional[logging.Logger] = None,
) -> None:
    """
    Point the service at a schema file.

    Both branches rewrite the service file: accepting the default replaces the
    schema token with $HOME/<schema_dir_name>/<token> even when that path is
    already in place.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    default_path = default_schema_path(app_settings)

    if prompter.confirm(f"Use default schema path {default_path}?"):
        schema_path = str(default_path)
    else:
        schema_path = prompter.ask("Schema file path")

    replace_token_in_file(
        app_settings.service_file_path,
        app_settings.schema_path_token,
        schema_path,
        app_settings,
        logger_to_use,
    )

    if not Path(schema_path).is_file():
        log_installer(
            f"{symbols.get('warning', '!')} Schema file {schema_path} does not exist yet. "
            f"Create it before starting {app_settings.service_name}.",
            "warning",
            logger_to_use,
            app_settings,
        )


def completion_guidance(app_settings: AppSettings) -> List[str]:
    """Lines telling the operator how to start the configured service."""
    symbols = get_symbols(app_settings)
    return [
        f"{symbols.get('sparkles', '✨')} {app_settings.service_name} is configured "
        f"({app_settings.service_file_path}).",
        "To start the service, run:",
        f"    {systemd_unit_command('daemon-reload', app_settings)}",
        f"    {systemd_unit_command('enable', app_settings)}",
        f"    {systemd_unit_command('start', app_settings)}",
        "Check that it is running with:",
        f"    {systemd_unit_command('status', app_settings)}",
    ]


def completion_step(
    app_settings: AppSettings,
    prompter: Prompter,
    current_logger: Optional[logging.Logger] = None,
) -> None:
    """Print the service start guidance."""
    logger_to_use = current_logger if current_logger else module_logger
    for line in completion_guidance(app_settings):
        log_installer(line, "info", logger_to_use, app_settings)


SERVICE_SETUP_STEPS: List[Step] = [
    Step("ENSURE_USER", "Ensure service user exists", ensure_service_user_step),
    Step("CONFIRM", "Confirm service configuration", confirm_configuration_step),
    Step("DATABASE_ADDRESS", "Configure database address", configure_database_address_step),
    Step("SCHEMA_PATH", "Configure schema file path", configure_schema_path_step),
    Step("COMPLETION", "Show service start guidance", completion_step),
]
