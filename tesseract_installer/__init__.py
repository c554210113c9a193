# tesseract_installer/__init__.py
# -*- coding: utf-8 -*-
"""
Interactive setup for an installed tesseract-olap systemd service.
"""

from tesseract_installer.config import SCRIPT_VERSION

__version__ = SCRIPT_VERSION
