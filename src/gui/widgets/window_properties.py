"""
Window properties for the main window: title and size.
"""

from PySide6.QtWidgets import QMainWindow

from core.config import APP_TITLE

DEFAULT_WIDTH = 900
DEFAULT_HEIGHT = 700
MINIMUM_WIDTH = 480
MINIMUM_HEIGHT = 360


class WindowPropertiesManager:
    """Applies the title and size settings to the main window."""

    def __init__(self, main_window: QMainWindow) -> None:
        """
        Initialize the window properties manager.

        Args:
            main_window: The main window to configure
        """
        self.main_window = main_window

    def setup_window_properties(self) -> None:
        """Set the window title, minimum size and default size."""
        self.main_window.setWindowTitle(APP_TITLE)
        self.main_window.setMinimumSize(MINIMUM_WIDTH, MINIMUM_HEIGHT)
        self.main_window.resize(DEFAULT_WIDTH, DEFAULT_HEIGHT)
