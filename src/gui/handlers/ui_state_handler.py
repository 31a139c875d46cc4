"""
UI state management functionality for the main window.

This module keeps the toolbar and status text in step with the session's
view state.
"""

import logging
from typing import TYPE_CHECKING

from core.error_handler import get_error_handler
from core.errors import BaseAppError
from core.view_state import ViewState
from gui.utils.styling import apply_status_style

if TYPE_CHECKING:
    from gui.main_window import MainWindow


class UIStateHandler:
    """Handles UI state management for the main window."""

    def __init__(self, main_window: "MainWindow") -> None:
        """Initialize the UI state handler."""
        self.main_window = main_window
        self._logger = logging.getLogger(__name__)

    def set_view_state(self, state: ViewState) -> None:
        """
        Set the view state and update UI accordingly.

        Args:
            state: The new view state
        """
        self.main_window.session.view_state = state
        self._logger.debug(f"View state: {state.name}")
        self._update_convert_button_state()

    def _update_convert_button_state(self) -> None:
        """Enable convert only when a directly viewable raster is open."""
        convert_button = self.main_window.ui.convert_button
        if convert_button:
            convert_button.setEnabled(self.main_window.session.can_convert)

    def set_status(self, text: str, status: str = "default", repaint: bool = False) -> None:
        """
        Show a message in the status label.

        Args:
            text: Message to show
            status: Styling variant ("default", "success", "error")
            repaint: Paint immediately, before a blocking call starts
        """
        label = self.main_window.ui.status_label
        if not label:
            return

        label.setText(text)
        apply_status_style(label, status)
        if repaint:
            label.repaint()

    def report_error(self, app_error: BaseAppError) -> None:
        """Log an error; the status line is updated by show_error via ErrorHandler.errorOccurred."""
        get_error_handler().handle(app_error)

    def show_error(self, app_error: BaseAppError) -> None:
        """Show an error as transient status text in error styling."""
        self.set_status(app_error.user_message, "error")

    def set_image_info(self, text: str) -> None:
        """Show the secondary line describing the loaded image."""
        if self.main_window.ui.info_label:
            self.main_window.ui.info_label.setText(text)
