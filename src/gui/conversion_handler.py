"""
Conversion handling for the NimFinder GUI.

This module runs the convert action: resolving the quality field, invoking
the encoder and reporting the size comparison.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, Signal

from core.config import DEFAULT_QUALITY
from core.errors import ConversionError, ErrorCode
from core.image_utils import format_size
from core.jxl_tools import ConversionResult, convert_to_jxl
from core.validation import resolve_quality

if TYPE_CHECKING:
    from gui.main_window import MainWindow


def size_comparison(original_size: int, jxl_size: int) -> str:
    """
    Describe the output size relative to the source.

    Returns:
        e.g. "Size: 1 MB -> 400 KB (40.0% of original)"
    """
    text = f"Size: {format_size(original_size)} -> {format_size(jxl_size)}"
    if original_size > 0:
        ratio = jxl_size / original_size * 100
        text += f" ({ratio:.1f}% of original)"
    return text


class ConversionHandler(QObject):
    """Handles JPEG XL conversion and the related UI updates."""

    conversionFinished = Signal(object)  # ConversionResult

    def __init__(self, main_window: "MainWindow") -> None:
        """Initialize the conversion handler."""
        super().__init__()
        self._main_window = main_window
        self._logger = logging.getLogger(__name__)

    def read_quality(self) -> int:
        """
        Resolve the quality field into the session.

        Invalid or out-of-range text is replaced by the default, both in the
        session and in the field itself.
        """
        quality_input = self._main_window.ui.quality_input
        text = quality_input.text() if quality_input else str(DEFAULT_QUALITY)

        quality, corrected = resolve_quality(text)
        if corrected and quality_input:
            quality_input.setText(str(DEFAULT_QUALITY))

        self._main_window.session.set_quality(quality)
        return self._main_window.session.quality

    def start_conversion(self) -> ConversionResult | None:
        """
        Convert the current source to JPEG XL.

        Returns:
            The ConversionResult, or None when there is nothing to convert
        """
        session = self._main_window.session
        if not session.can_convert or session.current_source_path is None:
            self._logger.debug("Convert requested with no convertible source")
            return None

        source = session.current_source_path
        quality = self.read_quality()
        ui_state = self._main_window.ui_state_handler
        ui_state.set_status(f"Converting to JXL (quality: {quality})...", repaint=True)

        result = convert_to_jxl(source, quality)

        if result.success and result.output_path is not None:
            ui_state.set_status(f"{result.message} | {self._describe_sizes(source, result.output_path)}", "success")
        else:
            ui_state.report_error(
                ConversionError(
                    code=ErrorCode.ENCODE_FAILED,
                    user_message=result.message,
                    context={"path": str(source), "quality": quality},
                )
            )

        self.conversionFinished.emit(result)
        return result

    def _describe_sizes(self, source: Path, output: Path) -> str:
        try:
            return size_comparison(source.stat().st_size, output.stat().st_size)
        except OSError as e:
            self._logger.warning(f"Could not compare file sizes: {e}")
            return "Size: unavailable"
