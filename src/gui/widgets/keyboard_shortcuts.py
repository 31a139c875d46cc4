"""
Keyboard shortcuts setup for the main window.

This module handles keyboard shortcut configuration,
separating shortcut management from main UI layout.
"""

from typing import Any

from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QMainWindow


class KeyboardShortcutsManager:
    """Manages keyboard shortcuts for the main window."""

    def __init__(self, main_window: QMainWindow) -> None:
        """
        Initialize the shortcuts manager.

        Args:
            main_window: The main window to add shortcuts to
        """
        self.main_window = main_window

    def setup_shortcuts(self, open_button: Any = None, convert_button: Any = None) -> None:
        """
        Set up all keyboard shortcuts.

        Args:
            open_button: Open Image button widget
            convert_button: Convert to JXL button widget
        """
        # Open shortcut
        open_action = QAction(self.main_window)
        open_action.setShortcut(QKeySequence("Ctrl+O"))
        open_action.triggered.connect(lambda: open_button.clicked.emit() if open_button else None)
        self.main_window.addAction(open_action)

        # Convert shortcut (Ctrl+Enter)
        convert_action = QAction(self.main_window)
        convert_action.setShortcut(QKeySequence("Ctrl+Return"))
        convert_action.triggered.connect(
            lambda: convert_button.clicked.emit() if convert_button and convert_button.isEnabled() else None
        )
        self.main_window.addAction(convert_action)
