"""
Error dialogs for NimFinder.

Most errors are shown as status text. The one blocking dialog is shown at
startup when the libjxl tools cannot be run, before the main window exists.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import QMessageBox, QPushButton, QWidget

from core.config import APP_TITLE, LIBJXL_DOWNLOAD_URL
from core.errors import DependencyError

logger = logging.getLogger(__name__)

DOWNLOAD_BUTTON_TEXT = "Open Download Page"


def build_tools_missing_dialog(error: DependencyError, parent: QWidget | None = None) -> QMessageBox:
    """
    Build the message box describing the missing libjxl tools.

    Args:
        error: Dependency error listing the missing tools
        parent: Parent widget, usually None at startup

    Returns:
        The configured, not yet shown, message box
    """
    help_url = error.help_url or LIBJXL_DOWNLOAD_URL

    msg_box = QMessageBox(parent)
    msg_box.setWindowTitle(f"{APP_TITLE} - Error")
    msg_box.setIcon(QMessageBox.Icon.Critical)
    msg_box.setText(error.user_message)
    msg_box.setInformativeText(f"Please install libjxl from:\n{help_url}")
    if error.technical_message:
        msg_box.setDetailedText(error.technical_message)

    download_button = msg_box.addButton(DOWNLOAD_BUTTON_TEXT, QMessageBox.ButtonRole.HelpRole)
    download_button.setObjectName("downloadButton")
    ok_button = msg_box.addButton(QMessageBox.StandardButton.Ok)
    msg_box.setDefaultButton(ok_button)

    return msg_box


def show_tools_missing_dialog(error: DependencyError, parent: QWidget | None = None) -> None:
    """
    Show the blocking missing-tools dialog.

    Returns after the user acknowledges it. Choosing the download button
    opens the libjxl releases page in the browser first.
    """
    msg_box = build_tools_missing_dialog(error, parent)
    msg_box.exec()

    clicked = msg_box.clickedButton()
    if isinstance(clicked, QPushButton) and clicked.objectName() == "downloadButton":
        url = error.help_url or LIBJXL_DOWNLOAD_URL
        if not QDesktopServices.openUrl(QUrl(url)):
            logger.warning(f"Could not open {url}")
