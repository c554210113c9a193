# tesseract_installer/config.py
# -*- coding: utf-8 -*-
"""
Centralized constants and default values for the tesseract-olap service setup.

This module defines the default service account, the location of the installed
systemd unit file, the literal tokens shipped in that unit file, and the
static logging symbols used by the installer.
"""

import re
from pathlib import Path
from typing import Dict, List

# Represents the version of the setup script logic.
SCRIPT_VERSION: str = "0.3.0"

# --- Service Account ---
SERVICE_USER_DEFAULT: str = "tesseract"
# Empty means `useradd` applies the system defaults.
USERADD_OPTIONS_DEFAULT: List[str] = []

# --- Service Definition File ---
SERVICE_NAME_DEFAULT: str = "tesseract-olap"
SERVICE_FILE_PATH_DEFAULT: Path = Path(
    "/etc/systemd/system/tesseract-olap.service"
)

# Literal tokens shipped in the packaged unit file.
DATABASE_ADDRESS_TOKEN_DEFAULT: str = "127.0.0.1:9000"
SCHEMA_PATH_TOKEN_DEFAULT: str = "schema.json"
# Default schema location is $HOME/<SCHEMA_DIR_NAME_DEFAULT>/<schema token>.
SCHEMA_DIR_NAME_DEFAULT: str = "tesseract-schema"

# --- Prompts ---
AFFIRMATIVE_PATTERN: re.Pattern = re.compile(r"^[Yy]$")

# --- Settings file and logging ---
CONFIG_FILE_ENV_VAR: str = "TESSERACT_INSTALLER_CONFIG"
CONFIG_FILE_PATH_DEFAULT: Path = Path("/etc/tesseract-installer/config.yaml")
LOG_PREFIX_DEFAULT: str = "[TESSERACT-SETUP]"

SYMBOLS_DEFAULT: Dict[str, str] = {
    "success": "✅",
    "error": "❌",
    "warning": "⚠️",
    "info": "ℹ️",
    "step": "➡️",
    "gear": "⚙️",
    "rocket": "🚀",
    "sparkles": "✨",
    "critical": "🔥",
    "debug": "🐛",
}
