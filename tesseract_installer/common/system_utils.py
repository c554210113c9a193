# tesseract_installer/common/system_utils.py
# -*- coding: utf-8 -*-
"""
System-level utility functions for the tesseract-olap service setup.

This module includes functions for checking and creating the service
account and for resolving the operator's home directory.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from tesseract_installer.common.command_utils import (
    get_symbols,
    log_installer,
    run_command,
    run_elevated_command,
)
from tesseract_installer.config_models import AppSettings

module_logger = logging.getLogger(__name__)


def system_user_exists(
    username: str,
    app_settings: Optional[AppSettings],
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Check whether `username` is a known account by running `id <username>`.

    Args:
        username: The account name to look up.
        app_settings: Optional application settings for logging symbols.
        current_logger: Optional logger instance.

    Returns:
        True if `id` succeeds, False if it reports the user as unknown.

    Raises:
        FileNotFoundError: If the `id` command is not available.
    """
    result = run_command(
        ["id", username],
        app_settings,
        check=False,
        capture_output=True,
        current_logger=current_logger,
    )
    return result.returncode == 0


def ensure_system_user(
    app_settings: AppSettings, current_logger: Optional[logging.Logger] = None
) -> bool:
    """
    Ensures the service account named in the settings exists.

    If the account is missing it is created with `useradd`, passing any
    configured `useradd_options`; with no options the system defaults apply.

    Arguments:
        app_settings (AppSettings): The application settings containing the
                                    account name and useradd options.
        current_logger (Optional[logging.Logger]): A specific logger to be used.
                                                   If not provided, a default
                                                   module-level logger is used.

    Returns:
        bool: True if the account was created, False if it already existed.

    Raises:
        subprocess.CalledProcessError: If `useradd` is rejected by the OS
                                       (e.g. insufficient privilege).
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    system_user = app_settings.service_user

    if system_user_exists(system_user, app_settings, logger_to_use):
        log_installer(
            f"{symbols.get('info', 'ℹ️')} System user {system_user} already exists.",
            "info",
            logger_to_use,
            app_settings,
        )
        return False

    log_installer(
        f"{symbols.get('info', 'ℹ️')} Creating system user {system_user}...",
        "info",
        logger_to_use,
        app_settings,
    )
    run_elevated_command(
        ["useradd", *app_settings.useradd_options, system_user],
        app_settings,
        current_logger=logger_to_use,
    )
    log_installer(
        f"{symbols.get('success', '✅')} Created system user {system_user}.",
        "success",
        logger_to_use,
        app_settings,
    )
    return True


def get_home_directory() -> Path:
    """
    Return the directory named by the HOME environment variable.

    Raises:
        KeyError: If HOME is unset or empty.
    """
    home = os.environ.get("HOME")
    if not home:
        raise KeyError("HOME environment variable is not set.")
    return Path(home)


def systemd_unit_command(
    action: str, app_settings: AppSettings
) -> str:
    """Render the systemctl command line shown to the operator for `action`."""
    if action == "daemon-reload":
        return "sudo systemctl daemon-reload"
    if action == "status":
        return f"systemctl status {app_settings.service_name}"
    return f"sudo systemctl {action} {app_settings.service_name}"
