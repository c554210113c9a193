# tesseract_installer/cli_handler.py
# -*- coding: utf-8 -*-
"""
Handles Command Line Interface (CLI) prompts for the tesseract-olap setup.

Steps never call input() directly; they receive a Prompter, so tests can
drive the installer with scripted answers.
"""

import logging
from typing import Callable, Optional

from tesseract_installer.common.command_utils import get_symbols, log_installer
from tesseract_installer.config import AFFIRMATIVE_PATTERN
from tesseract_installer.config_models import AppSettings

module_logger = logging.getLogger(__name__)


class Prompter:
    """
    Reads operator answers through an injectable input function.

    Parameters:
    app_settings : AppSettings
        Provides the symbols shown in front of each prompt.
    input_func : Callable[[str], str]
        Called with the rendered prompt; returns the raw answer. Defaults to
        the builtin input().
    current_logger : Optional[logging.Logger]
        Logger for EOF notices. Defaults to the module logger.
    """

    def __init__(
        self,
        app_settings: AppSettings,
        input_func: Callable[[str], str] = input,
        current_logger: Optional[logging.Logger] = None,
    ):
        self.app_settings = app_settings
        self.input_func = input_func
        self.logger = current_logger if current_logger else module_logger

    def confirm(self, prompt_message: str) -> bool:
        """
        Ask a yes/no question. Only an answer matching the affirmative
        pattern counts as yes; anything else, including EOF, is no.
        """
        symbols = get_symbols(self.app_settings)
        try:
            user_input = self.input_func(
                f"   {symbols.get('info', 'ℹ️')} {prompt_message} (y/N): "
            ).strip()
        except EOFError:
            log_installer(
                f"{symbols.get('warning', '!')} No user input (EOF), defaulting to 'N' for prompt: '{prompt_message}'",
                "warning",
                self.logger,
                self.app_settings,
            )
            return False
        return AFFIRMATIVE_PATTERN.match(user_input) is not None

    def ask(self, prompt_message: str) -> str:
        """
        Ask for a free-text value. The answer is returned without validation,
        only surrounding whitespace is stripped.

        Raises:
            EOFError: If input ends before an answer is given.
        """
        symbols = get_symbols(self.app_settings)
        try:
            return self.input_func(
                f"   {symbols.get('step', '➡️')} {prompt_message}: "
            ).strip()
        except EOFError as e:
            log_installer(
                f"{symbols.get('warning', '!')} No user input (EOF) for prompt: '{prompt_message}'",
                "warning",
                self.logger,
                self.app_settings,
            )
            raise EOFError(
                f"No input given for prompt: '{prompt_message}'"
            ) from e
