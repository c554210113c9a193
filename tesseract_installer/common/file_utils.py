# tesseract_installer/common/file_utils.py
# -*- coding: utf-8 -*-
"""
Plain-text token substitution for installed service definition files.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from tesseract_installer.config_models import AppSettings

from .command_utils import get_symbols, log_installer

module_logger = logging.getLogger(__name__)


def _replaceable_positions(
    contents: str, token: str, replacement: str
) -> List[int]:
    """
    Start offsets of the occurrences of `token` that substitute_token rewrites.

    Occurrences are found left to right without overlap, as str.replace does.
    An occurrence is skipped only when it lies wholly inside a copy of
    `replacement` already present in `contents`.
    """
    if not token:
        raise ValueError("Substitution token must not be empty.")
    # Offsets at which `token` appears within `replacement` itself.
    inner_offsets = [
        offset
        for offset in range(len(replacement) - len(token) + 1)
        if replacement.startswith(token, offset)
    ]

    positions = []
    start = contents.find(token)
    while start != -1:
        inside_replacement = any(
            start >= offset and contents.startswith(replacement, start - offset)
            for offset in inner_offsets
        )
        if not inside_replacement:
            positions.append(start)
        start = contents.find(token, start + len(token))
    return positions


def substitute_token(contents: str, token: str, replacement: str) -> str:
    """
    Literally replace every occurrence of `token` in `contents`.

    Occurrences of `token` that sit entirely inside an occurrence of
    `replacement` are left alone, so applying the same substitution twice
    gives the same text as applying it once (e.g. replacing "schema.json"
    with "/home/u/tesseract-schema/schema.json"). A token that only partly
    overlaps a replacement occurrence is still replaced.

    Args:
        contents: The text to rewrite.
        token: The literal text to search for. Not a regular expression.
        replacement: The text to put in place of each occurrence.

    Returns:
        The rewritten text.

    Raises:
        ValueError: If `token` is empty.
    """
    pieces = []
    last_end = 0
    for start in _replaceable_positions(contents, token, replacement):
        pieces.append(contents[last_end:start])
        pieces.append(replacement)
        last_end = start + len(token)
    pieces.append(contents[last_end:])
    return "".join(pieces)


def count_token_occurrences(
    contents: str, token: str, replacement: str
) -> int:
    """Number of occurrences substitute_token would replace."""
    return len(_replaceable_positions(contents, token, replacement))


def replace_token_in_file(
    file_path: Union[str, Path],
    token: str,
    replacement: str,
    app_settings: Optional[AppSettings],
    current_logger: Optional[logging.Logger] = None,
) -> int:
    """
    Rewrite `file_path` in place with every `token` replaced by `replacement`.

    The file is read and written back as UTF-8 text. The write is not atomic
    and no backup is kept.

    Parameters:
        file_path (Union[str, Path]): The service definition file to patch.
        token (str): Literal text to replace.
        replacement (str): Text to substitute.
        app_settings (Optional[AppSettings]): Settings for logging symbols.
        current_logger (Optional[logging.Logger]): Logger to use. If not
            provided, a module-level logger is used.

    Returns:
        int: The number of occurrences replaced. The file is rewritten even
            when this is zero.

    Raises:
        OSError: If the file cannot be read or written (missing file,
            permission denied, ...).
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    path = Path(file_path)

    contents = path.read_text(encoding="utf-8")
    count = count_token_occurrences(contents, token, replacement)
    new_contents = substitute_token(contents, token, replacement)
    path.write_text(new_contents, encoding="utf-8")

    if count == 0:
        log_installer(
            f"{symbols.get('warning', '!')} No occurrence of '{token}' found in {path}.",
            "warning",
            logger_to_use,
            app_settings,
        )
    else:
        log_installer(
            f"{symbols.get('success', '✅')} Replaced {count} occurrence(s) of '{token}' with '{replacement}' in {path}.",
            "success",
            logger_to_use,
            app_settings,
        )
    return count
