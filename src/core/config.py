"""
Configuration constants for NimFinder.

This module holds the application identifiers, conversion defaults and
the file-format tables shared by the core and GUI layers.
"""

import os
from pathlib import Path

from PySide6.QtCore import QCoreApplication, QStandardPaths

# Application identifiers for QStandardPaths and window titles
APP_ORGANIZATION = "NimFinder"
APP_NAME = "NimFinder"
APP_TITLE = "NimFinder - JXL Image Tool"

# Conversion defaults
DEFAULT_QUALITY = 85
MIN_QUALITY = 1
MAX_QUALITY = 100

# File formats (lowercase, with leading dot)
JXL_EXTENSION = ".jxl"
PREVIEW_EXTENSION = ".png"
SUPPORTED_INPUT_FORMATS: tuple[str, ...] = (".png", ".jpg", ".jpeg", ".gif", ".bmp", ".ppm", ".pgm")

# Prefix for decoded previews in the temp directory
TEMP_PREVIEW_PREFIX = "nimfinder_preview_"

# External libjxl tools
CJXL_ENV_VAR = "NIMFINDER_CJXL"
DJXL_ENV_VAR = "NIMFINDER_DJXL"
LIBJXL_DOWNLOAD_URL = "https://github.com/libjxl/libjxl/releases"

LOG_LEVEL_ENV_VAR = "NIMFINDER_LOG_LEVEL"


def get_cjxl_command() -> str:
    """Return the encoder executable, honouring the environment override."""
    return os.environ.get(CJXL_ENV_VAR) or "cjxl"


def get_djxl_command() -> str:
    """Return the decoder executable, honouring the environment override."""
    return os.environ.get(DJXL_ENV_VAR) or "djxl"


def get_log_level() -> str:
    """
    Get the root log level name from the environment.

    Returns:
        One of DEBUG, INFO, WARNING, ERROR; INFO when unset or unknown
    """
    level = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        return "INFO"
    return level


def get_app_data_dir() -> Path:
    """
    Get the writable application data directory using QStandardPaths.

    Returns:
        Path to the data directory for this application
    """
    app_data_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
    if app_data_location:
        return Path(app_data_location)

    # Fallback to config location
    config_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)
    return Path(config_location) / APP_ORGANIZATION / APP_NAME


def get_default_open_dir() -> str:
    """
    Get the starting directory for the open-file dialog.

    Returns:
        The user's Pictures directory, or the current working directory as fallback
    """
    pictures_dir = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.PicturesLocation)
    if pictures_dir and Path(pictures_dir).exists():
        return pictures_dir
    return str(Path.cwd())


def setup_qsettings() -> None:
    """
    Configure the Qt application identifiers.

    This should be called early in application startup so that
    QStandardPaths resolves to this application's directories.
    """
    QCoreApplication.setOrganizationName(APP_ORGANIZATION)
    QCoreApplication.setApplicationName(APP_NAME)
