# tesseract_installer/step_executor.py
# -*- coding: utf-8 -*-
"""
Provides functionality to execute the installer's setup steps.

Steps run strictly in order. The first step that fails, or that asks to halt,
ends the run; nothing already done is undone.
"""

import enum
import logging
from typing import Any, Callable, NamedTuple, Optional, Sequence

from tesseract_installer.cli_handler import Prompter
from tesseract_installer.common.command_utils import get_symbols, log_installer
from tesseract_installer.config_models import AppSettings

module_logger = logging.getLogger(__name__)

# Returned by a step function to end the run successfully.
HALT = object()

StepFunction = Callable[[AppSettings, Prompter, Optional[logging.Logger]], Any]


class StepStatus(enum.Enum):
    SUCCEEDED = "succeeded"
    HALTED = "halted"
    FAILED = "failed"


class Step(NamedTuple):
    tag: str
    description: str
    function: StepFunction


def execute_step(
    step: Step,
    app_settings: AppSettings,
    prompter: Prompter,
    current_logger_instance: Optional[logging.Logger] = None,
) -> StepStatus:
    """
    Execute a single setup step.

    Args:
        step: The step to run. Its function is called as
              function(app_settings, prompter, logger) and should return False
              to indicate failure or HALT to stop the run without error. Any
              other return value (including None) is considered success. An
              exception will always be treated as a failure.
        app_settings: The application settings object.
        prompter: Source of operator answers, handed to the step function.
        current_logger_instance: The logger instance to use.

    Returns:
        The StepStatus of the step.
    """
    logger_to_use = (
        current_logger_instance if current_logger_instance else module_logger
    )
    symbols = get_symbols(app_settings)

    log_installer(
        f"--- {symbols.get('step', '➡️')} Executing: {step.description} ({step.tag}) ---",
        "info",
        logger_to_use,
        app_settings,
    )
    try:
        step_result = step.function(app_settings, prompter, logger_to_use)
    except Exception as e:
        log_installer(
            f"{symbols.get('error', '❌')} FAILED: {step.description} ({step.tag})",
            "error",
            logger_to_use,
            app_settings,
        )
        log_installer(
            f"   Error details: {str(e)}",
            "error",
            logger_to_use,
            app_settings,
            exc_info=logger_to_use.isEnabledFor(logging.DEBUG),
        )
        return StepStatus.FAILED

    if step_result is HALT:
        log_installer(
            f"{symbols.get('info', 'ℹ️')} Stopping after: {step.description} ({step.tag})",
            "info",
            logger_to_use,
            app_settings,
        )
        return StepStatus.HALTED

    if step_result is False:
        log_installer(
            f"{symbols.get('error', '❌')} Step function returned False: {step.description} ({step.tag})",
            "error",
            logger_to_use,
            app_settings,
        )
        return StepStatus.FAILED

    log_installer(
        f"--- {symbols.get('success', '✅')} Successfully completed: {step.description} ({step.tag}) ---",
        "success",
        logger_to_use,
        app_settings,
    )
    return StepStatus.SUCCEEDED


def run_steps(
    steps: Sequence[Step],
    app_settings: AppSettings,
    prompter: Prompter,
    current_logger_instance: Optional[logging.Logger] = None,
) -> StepStatus:
    """
    Run `steps` in order, stopping at the first one that does not succeed.

    Returns:
        SUCCEEDED if every step ran, otherwise the status of the step that
        stopped the run (HALTED or FAILED).
    """
    for step in steps:
        status = execute_step(
            step, app_settings, prompter, current_logger_instance
        )
        if status is not StepStatus.SUCCEEDED:
            return status
    return StepStatus.SUCCEEDED
