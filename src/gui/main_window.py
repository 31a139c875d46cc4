"""
Main window for the NimFinder application.

This module contains the MainWindow class which provides the main
user interface and owns the session.
"""

import logging
from pathlib import Path

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QLabel, QLineEdit, QMainWindow, QPushButton

from core.error_handler import get_error_handler
from core.errors import BaseAppError
from core.session import Session
from core.view_state import ViewState
from gui.conversion_handler import ConversionHandler
from gui.handlers.file_handler import FileHandler
from gui.handlers.ui_state_handler import UIStateHandler
from gui.widgets.main_window_ui import MainWindowUI
from gui.widgets.preview import ImagePreview


class MainWindow(QMainWindow):
    """
    Main application window.

    Provides the open/convert toolbar, the preview surface and the status line.
    """

    def __init__(self) -> None:
        """Initialize the main window."""
        super().__init__()
        self._logger = logging.getLogger(__name__)

        self.session = Session()

        # Set up the UI
        self.ui = MainWindowUI(self)
        self.ui.setup_ui()

        # Initialize handlers
        self.file_handler = FileHandler(self)
        self.ui_state_handler = UIStateHandler(self)
        self.conversion_handler = ConversionHandler(self)

        self._connect_signals()
        self.ui_state_handler.set_view_state(ViewState.EMPTY)

    def _connect_signals(self) -> None:
        """Connect UI signals to their handlers."""
        if self.ui.open_button:
            self.ui.open_button.clicked.connect(self.file_handler.on_open_clicked)
        if self.ui.convert_button:
            self.ui.convert_button.clicked.connect(self.on_convert_clicked)
        get_error_handler().errorOccurred.connect(self._on_error_occurred)

    def _on_error_occurred(self, app_error: BaseAppError) -> None:
        self.ui_state_handler.show_error(app_error)

    def on_convert_clicked(self) -> None:
        """Handle convert button click."""
        self.conversion_handler.start_conversion()

    def open_path(self, path: str | Path) -> None:
        """Open a file as if it had been chosen in the file dialog."""
        self.file_handler.open_path(Path(path))

    def closeEvent(self, event: QCloseEvent) -> None:
        """Delete the temp preview before the window goes away."""
        self.session.close()
        self._logger.debug("Session closed")
        event.accept()

    # Property accessors for UI components
    @property
    def status_label(self) -> QLabel:
        """Get the status label."""
        if self.ui.status_label is None:
            raise AttributeError("status_label not found in UI")
        return self.ui.status_label

    @property
    def info_label(self) -> QLabel:
        """Get the image information label."""
        if self.ui.info_label is None:
            raise AttributeError("info_label not found in UI")
        return self.ui.info_label

    @property
    def open_button(self) -> QPushButton:
        """Get the open button."""
        if self.ui.open_button is None:
            raise AttributeError("open_button not found in UI")
        return self.ui.open_button

    @property
    def convert_button(self) -> QPushButton:
        """Get the convert button."""
        if self.ui.convert_button is None:
            raise AttributeError("convert_button not found in UI")
        return self.ui.convert_button

    @property
    def quality_input(self) -> QLineEdit:
        """Get the quality input."""
        if self.ui.quality_input is None:
            raise AttributeError("quality_input not found in UI")
        return self.ui.quality_input

    @property
    def preview(self) -> ImagePreview:
        """Get the preview surface."""
        if self.ui.preview is None:
            raise AttributeError("preview not found in UI")
        return self.ui.preview
