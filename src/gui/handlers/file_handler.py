"""
File handling functionality for the main window.

This module implements the open action: choosing a file, decoding JPEG XL
sources to a temp preview, loading the preview and updating the session.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from PySide6.QtWidgets import QFileDialog

from core.config import get_default_open_dir
from core.errors import ConversionError, ErrorCode, FileError
from core.image_utils import build_open_dialog_filter, classify_file, get_image_info
from core.jxl_tools import decode_jxl_to_temp
from core.session import remove_temp_file
from core.view_state import ViewState

if TYPE_CHECKING:
    from gui.main_window import MainWindow


class FileHandler:
    """Handles file-related operations for the main window."""

    def __init__(self, main_window: "MainWindow") -> None:
        """Initialize the file handler."""
        self.main_window = main_window
        self._logger = logging.getLogger(__name__)

    def on_open_clicked(self) -> None:
        """Handle Open Image button click."""
        source = self.main_window.session.current_source_path
        start_dir = str(source.parent) if source else get_default_open_dir()

        file_path, _ = QFileDialog.getOpenFileName(self.main_window, "Open Image", start_dir, build_open_dialog_filter())

        if file_path:
            self.open_path(Path(file_path))

    def open_path(self, path: Path) -> None:
        """
        Open a file chosen by the user.

        The previous temp preview is always released first, whatever the
        type of the new file.
        """
        self._logger.info(f"Opening {path}")
        self.main_window.session.release_preview()

        classification = classify_file(path)
        if not classification.is_recognized:
            self.main_window.ui_state_handler.report_error(
                FileError(
                    code=ErrorCode.UNSUPPORTED_FORMAT,
                    user_message=f"Unsupported file format: {path.name}",
                    context={"path": str(path)},
                )
            )
            return

        if classification.is_jxl:
            self._open_jxl(path)
        else:
            self._open_source(path)

    def _open_jxl(self, path: Path) -> None:
        """Decode a JPEG XL file and show its temp preview."""
        ui_state = self.main_window.ui_state_handler
        ui_state.set_status("Decoding JXL file...", repaint=True)

        result = decode_jxl_to_temp(path)
        if not result.success or result.temp_path is None:
            ui_state.report_error(
                ConversionError(
                    code=ErrorCode.DECODE_FAILED,
                    user_message=result.message,
                    context={"path": str(path)},
                )
            )
            return

        if not self._load_and_display(result.temp_path, path):
            remove_temp_file(result.temp_path)
            return

        self.main_window.session.open_jxl_preview(path, result.temp_path)
        ui_state.set_view_state(ViewState.VIEWING_JXL_PREVIEW)
        ui_state.set_status(f"Viewing JXL: {path.name}", "success")

    def _open_source(self, path: Path) -> None:
        """Show a raster directly and offer conversion."""
        if not self._load_and_display(path, path):
            return

        self.main_window.session.open_source(path)
        ui_state = self.main_window.ui_state_handler
        ui_state.set_view_state(ViewState.VIEWING_SOURCE)
        ui_state.set_status(f"Loaded: {path.name} - Click 'Convert to JXL' to convert")

    def _load_and_display(self, image_path: Path, source_path: Path) -> bool:
        """
        Load an image into the preview.

        Args:
            image_path: Raster to decode for display
            source_path: File the user opened, described in the info line

        Returns:
            True if the preview now shows the image
        """
        preview = self.main_window.ui.preview
        if preview is None:
            return False

        try:
            image = preview.load_image(image_path)
        except FileError as e:
            self.main_window.ui_state_handler.report_error(e)
            return False

        info = get_image_info(source_path)
        if "error" in info:
            self.main_window.ui_state_handler.set_image_info(f"{source_path.name} - {image.width()}x{image.height()}")
        else:
            self.main_window.ui_state_handler.set_image_info(
                f"{info['name']} ({info['size_text']}) - {image.width()}x{image.height()}"
            )
        return True
