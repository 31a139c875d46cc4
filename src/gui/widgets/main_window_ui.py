"""
UI setup and layout management for the main window.

This module provides UI setup functionality for the main window,
separating layout concerns from business logic.
"""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from core.config import DEFAULT_QUALITY, MAX_QUALITY, MIN_QUALITY
from gui.utils.styling import apply_status_style
from gui.widgets.keyboard_shortcuts import KeyboardShortcutsManager
from gui.widgets.preview import ImagePreview
from gui.widgets.window_properties import WindowPropertiesManager

READY_MESSAGE = "Ready - Supports PNG, JPG, GIF, BMP. Open a JXL to view it."


class MainWindowUI:
    """
    Handles UI setup and layout for the main window.

    Separates UI construction from business logic and event handling.
    """

    def __init__(self, main_window: QMainWindow) -> None:
        """
        Initialize the UI manager.

        Args:
            main_window: The main window to set up
        """
        self.main_window = main_window
        self.central_widget: QWidget | None = None

        self.window_properties = WindowPropertiesManager(main_window)
        self.keyboard_shortcuts = KeyboardShortcutsManager(main_window)

        # Toolbar
        self.open_button: QPushButton | None = None
        self.quality_input: QLineEdit | None = None
        self.convert_button: QPushButton | None = None

        # Preview and status
        self.preview: ImagePreview | None = None
        self.status_label: QLabel | None = None
        self.info_label: QLabel | None = None

    def setup_ui(self) -> None:
        """Set up the complete user interface."""
        self.window_properties.setup_window_properties()
        self._setup_central_widget()
        self.keyboard_shortcuts.setup_shortcuts(open_button=self.open_button, convert_button=self.convert_button)

    def _setup_central_widget(self) -> None:
        """Set up the central widget and main layout."""
        self.central_widget = QWidget()
        self.main_window.setCentralWidget(self.central_widget)

        main_layout = QVBoxLayout(self.central_widget)
        main_layout.setContentsMargins(10, 10, 10, 10)
        main_layout.setSpacing(10)

        self._setup_toolbar(main_layout)

        self.preview = ImagePreview()
        main_layout.addWidget(self.preview, stretch=1)

        self._setup_status_area(main_layout)

    def _setup_toolbar(self, main_layout: QVBoxLayout) -> None:
        """Set up the toolbar row: open, quality field and convert."""
        toolbar = QHBoxLayout()
        toolbar.setSpacing(10)

        self.open_button = QPushButton("Open Image")
        self.open_button.setMinimumWidth(110)
        self.open_button.setAccessibleName("Open image")
        self.open_button.setAccessibleDescription("Opens a file dialog to choose an image or JPEG XL file")
        self.open_button.setToolTip("Open an image or JPEG XL file (Ctrl+O)")
        toolbar.addWidget(self.open_button)

        quality_label = QLabel("Quality:")
        toolbar.addWidget(quality_label)

        self.quality_input = QLineEdit(str(DEFAULT_QUALITY))
        self.quality_input.setMinimumWidth(50)
        self.quality_input.setMaximumWidth(60)
        self.quality_input.setAccessibleName("Quality")
        self.quality_input.setAccessibleDescription(f"Encoder quality from {MIN_QUALITY} to {MAX_QUALITY}")
        self.quality_input.setToolTip(
            f"JPEG XL quality ({MIN_QUALITY}-{MAX_QUALITY}). Invalid values reset to {DEFAULT_QUALITY}."
        )
        quality_label.setBuddy(self.quality_input)
        toolbar.addWidget(self.quality_input)

        quality_hint = QLabel(f"({MIN_QUALITY}-{MAX_QUALITY})")
        toolbar.addWidget(quality_hint)

        self.convert_button = QPushButton("Convert to JXL")
        self.convert_button.setMinimumWidth(130)
        self.convert_button.setAccessibleName("Convert to JXL")
        self.convert_button.setAccessibleDescription("Encode the opened image to JPEG XL next to the original")
        self.convert_button.setToolTip("Convert the opened image to JPEG XL (Ctrl+Enter)")
        self.convert_button.setEnabled(False)
        toolbar.addWidget(self.convert_button)

        toolbar.addStretch()
        main_layout.addLayout(toolbar)

    def _setup_status_area(self, main_layout: QVBoxLayout) -> None:
        """Set up the status bar row."""
        status_layout = QVBoxLayout()
        status_layout.setSpacing(4)

        self.status_label = QLabel(READY_MESSAGE)
        self.status_label.setObjectName("statusLabel")
        self.status_label.setAccessibleName("Status message")
        self.status_label.setAccessibleDescription("Displays the current file, conversion results and errors")
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        self.status_label.setWordWrap(True)
        self.status_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        apply_status_style(self.status_label, "default")
        status_layout.addWidget(self.status_label)

        self.info_label = QLabel("")
        self.info_label.setObjectName("imageInfoLabel")
        self.info_label.setAccessibleName("Image information")
        status_layout.addWidget(self.info_label)

        main_layout.addLayout(status_layout)

