"""
Image preview surface.

Draws the loaded image centered on a dark background, scaled down to fit
but never enlarged, or a placeholder message when nothing is loaded.
"""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QRect, Qt
from PySide6.QtGui import QFont, QImage, QPainter, QPaintEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from core.errors import ErrorCode, FileError
from gui.utils.styling import placeholder_text_color, preview_background_color

PLACEHOLDER_TEXT = "Open an image to preview it here"
PLACEHOLDER_FONT_SIZE = 16


def fit_rect(area_width: int, area_height: int, image_width: int, image_height: int) -> tuple[int, int, int, int]:
    """
    Compute where to draw an image inside an area.

    The image is scaled uniformly to fit, capped at 100%, and centered.

    Returns:
        Tuple of (x, y, width, height)
    """
    if image_width <= 0 or image_height <= 0:
        return 0, 0, 0, 0

    scale = min(area_width / image_width, area_height / image_height, 1.0)
    draw_width = int(image_width * scale)
    draw_height = int(image_height * scale)
    x = (area_width - draw_width) // 2
    y = (area_height - draw_height) // 2
    return x, y, draw_width, draw_height


class ImagePreview(QWidget):
    """
    Preview surface for the currently loaded image.

    Owns the loaded QImage; loading a new image replaces the previous one.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._image: QImage | None = None
        self._logger = logging.getLogger(__name__)

        self.setObjectName("imagePreview")
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(200, 150)
        self.setAccessibleName("Image preview")
        self.setAccessibleDescription("Shows the opened image or the decoded JPEG XL preview")

    @property
    def image(self) -> QImage | None:
        """The image currently shown, or None."""
        return self._image

    def has_image(self) -> bool:
        return self._image is not None

    def load_image(self, path: Path) -> QImage:
        """
        Decode an image file and show it, replacing the current image.

        Args:
            path: Raster file Qt can read (PNG, JPEG, GIF, BMP, PPM, PGM)

        Returns:
            The loaded image

        Raises:
            FileError: If the file is missing or cannot be decoded. The
                current image is kept in that case.
        """
        if not path.is_file():
            raise FileError(
                code=ErrorCode.FILE_NOT_FOUND,
                user_message="Error: File not found",
                technical_message=f"No such file: {path}",
                context={"path": str(path)},
            )

        image = QImage(str(path))
        if image.isNull():
            raise FileError(
                code=ErrorCode.FILE_UNREADABLE,
                user_message=f"Error loading image: {path.name}",
                technical_message=f"QImage could not decode {path}",
                context={"path": str(path)},
            )

        self._image = image
        self._logger.debug(f"Loaded {path} ({image.width()}x{image.height()})")
        self.update()
        return image

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), preview_background_color())

            if self._image is not None:
                x, y, w, h = fit_rect(self.width(), self.height(), self._image.width(), self._image.height())
                painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
                painter.drawImage(QRect(x, y, w, h), self._image)
            else:
                font = QFont(painter.font())
                font.setPointSize(PLACEHOLDER_FONT_SIZE)
                painter.setFont(font)
                painter.setPen(placeholder_text_color())
                painter.drawText(self.rect(), Qt.AlignmentFlag.AlignCenter, PLACEHOLDER_TEXT)
        finally:
            painter.end()
