# tesseract_installer/common/command_utils.py
# -*- coding: utf-8 -*-
"""
Utilities for executing shell commands and logging their output.
"""

import logging
import os
import subprocess
from typing import Dict, List, Optional

from tesseract_installer.config import SYMBOLS_DEFAULT
from tesseract_installer.config_models import AppSettings

module_logger = logging.getLogger(__name__)


def get_symbols(app_settings: Optional[AppSettings]) -> Dict[str, str]:
    """Return the configured logging symbols, or the static defaults."""
    return (
        app_settings.symbols
        if app_settings and app_settings.symbols
        else SYMBOLS_DEFAULT
    )


def log_installer(
    message: str,
    level: str = "info",
    current_logger: Optional[logging.Logger] = None,
    app_settings: Optional[AppSettings] = None,
    exc_info: bool = False,
) -> None:
    """
    Logs a message from the installer at the given level.

    Args:
        message (str): The log message to be recorded.
        level (str): The severity level of the log message. Defaults to "info". Common options
            include "debug", "info", "success", "warning", "error", and "critical".
            "success" is logged at INFO level.
        current_logger (Optional[logging.Logger]): A logger instance to use for logging. If not provided,
            a module-level logger will be used.
        app_settings (Optional[AppSettings]): When given, its log_prefix is prepended to the message.
        exc_info (bool): Indicator to include exception details in the log. By default, this is set to False.

    Returns:
        None
    """
    effective_logger = current_logger if current_logger else module_logger
    if app_settings and app_settings.log_prefix:
        message = f"{app_settings.log_prefix} {message}"

    if level == "warning":
        effective_logger.warning(message, exc_info=exc_info)
    elif level == "error":
        effective_logger.error(message, exc_info=exc_info)
    elif level == "critical":
        effective_logger.critical(message, exc_info=exc_info)
    elif level == "debug":
        effective_logger.debug(message, exc_info=exc_info)
    else:
        effective_logger.info(message, exc_info=exc_info)


def _get_elevated_command_prefix() -> List[str]:
    """
    Determines the command prefix that ensures elevated privileges when required.

    Returns:
        List[str]: ["sudo"] if the effective user ID is not 0, otherwise an
        empty list.
    """
    return [] if os.geteuid() == 0 else ["sudo"]


def run_command(
    command: List[str],
    app_settings: Optional[AppSettings],
    check: bool = True,
    capture_output: bool = False,
    current_logger: Optional[logging.Logger] = None,
) -> subprocess.CompletedProcess:
    """
    Executes a system command and logs the process details and results.

    Output streams are only captured when `capture_output` is True; otherwise
    the command writes straight to the terminal, so its native error text
    reaches the operator unchanged.

    Args:
        command (List[str]): The system command to execute, as an argument list.
        app_settings (Optional[AppSettings]): Application settings used for
            logging symbols and prefix. Defaults are used when None.
        check (bool): Whether to raise a CalledProcessError when a non-zero exit code is returned.
            Defaults to True.
        capture_output (bool): Whether to capture standard output and standard error as text.
            Defaults to False.
        current_logger (Optional[logging.Logger]): A logger to use for logging details. If not provided,
            a default logger will be used.

    Returns:
        subprocess.CompletedProcess: The completed process instance.

    Raises:
        subprocess.CalledProcessError: Raised if the process returns a non-zero exit code and the check
            parameter is set to True.
        FileNotFoundError: Raised if the specified command is not found on the system.
    """
    effective_logger = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    command_to_log_str = subprocess.list2cmdline(command)

    log_installer(
        f"{symbols.get('gear', '⚙️')} Executing: {command_to_log_str}",
        "debug",
        effective_logger,
        app_settings,
    )
    try:
        result = subprocess.run(
            command,
            check=check,
            capture_output=capture_output,
            text=True,
        )
        if capture_output:
            if result.stdout and result.stdout.strip():
                log_installer(
                    f"   stdout: {result.stdout.strip()}",
                    "debug",
                    effective_logger,
                    app_settings,
                )
            if (
                result.stderr
                and result.stderr.strip()
                and (not check or result.returncode == 0)
            ):
                log_installer(
                    f"   stderr: {result.stderr.strip()}",
                    "debug",
                    effective_logger,
                    app_settings,
                )
        return result
    except subprocess.CalledProcessError as e:
        stderr_info = (
            e.stderr.strip()
            if e.stderr and hasattr(e.stderr, "strip")
            else "N/A"
        )
        cmd_executed_str = (
            subprocess.list2cmdline(e.cmd)
            if isinstance(e.cmd, list)
            else str(e.cmd)
        )
        log_installer(
            f"{symbols.get('error', '❌')} Command `{cmd_executed_str}` failed (rc {e.returncode}).",
            "error",
            effective_logger,
            app_settings,
        )
        if stderr_info != "N/A":
            log_installer(
                f"   stderr: {stderr_info}",
                "error",
                effective_logger,
                app_settings,
            )
        raise
    except FileNotFoundError as e:
        log_installer(
            f"{symbols.get('error', '❌')} Command not found: {e.filename}. Ensure it's installed and in PATH.",
            "error",
            effective_logger,
            app_settings,
        )
        raise


def run_elevated_command(
    command: List[str],
    app_settings: Optional[AppSettings],
    current_logger: Optional[logging.Logger] = None,
) -> subprocess.CompletedProcess:
    """
    Executes a command with elevated permissions, prefixing it with `sudo`
    unless the process already runs as root. Output is not captured and a
    non-zero exit raises CalledProcessError. See run_command.
    """
    prefix = _get_elevated_command_prefix()
    elevated_command_list = prefix + list(command)
    return run_command(
        elevated_command_list,
        app_settings,
        current_logger=current_logger,
    )
