# tesseract_installer/main_installer.py
# -*- coding: utf-8 -*-
"""
Entry point for the tesseract-olap service installer.

The installer takes no command-line flags; everything is asked interactively.
"""

import logging
import sys
from typing import Callable, Optional

from tesseract_installer.cli_handler import Prompter
from tesseract_installer.common.command_utils import get_symbols, log_installer
from tesseract_installer.common.logging_config import setup_logging
from tesseract_installer.config import SCRIPT_VERSION
from tesseract_installer.config_loader import load_app_settings
from tesseract_installer.config_models import AppSettings
from tesseract_installer.service_configurator import SERVICE_SETUP_STEPS
from tesseract_installer.step_executor import StepStatus, run_steps

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def main(
    app_settings: Optional[AppSettings] = None,
    input_func: Callable[[str], str] = input,
) -> int:
    """
    Run the setup steps and return the process exit code.

    Args:
        app_settings: Settings to use. Loaded from the environment and the
            YAML settings file when None.
        input_func: Source of operator answers, the builtin input() by default.

    Returns:
        0 when setup completes or the operator declines to continue,
        1 when a step fails, 130 when interrupted.
    """
    if app_settings is None:
        setup_logging()
        app_settings = load_app_settings()
    if app_settings.log_file:
        setup_logging(log_file_path=app_settings.log_file)

    logger = logging.getLogger("tesseract-installer")
    symbols = get_symbols(app_settings)
    log_installer(
        f"{symbols.get('rocket', '🚀')} Starting {app_settings.service_name} setup (Script Version: {SCRIPT_VERSION})...",
        "info",
        logger,
        app_settings,
    )

    prompter = Prompter(app_settings, input_func=input_func, current_logger=logger)
    try:
        status = run_steps(SERVICE_SETUP_STEPS, app_settings, prompter, logger)
    except KeyboardInterrupt:
        log_installer(
            f"{symbols.get('warning', '!')} Interrupted. {app_settings.service_file_path} may be partially configured.",
            "warning",
            logger,
            app_settings,
        )
        return EXIT_INTERRUPTED

    if status is StepStatus.FAILED:
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
