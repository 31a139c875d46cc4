"""
Tests for the image preview surface.
"""

import pytest
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QImage

from core.errors import ErrorCode, FileError
from gui.widgets.preview import ImagePreview, fit_rect


def write_png(path, width=64, height=48, color=Qt.GlobalColor.red):
    image = QImage(width, height, QImage.Format.Format_RGB32)
    image.fill(color)
    assert image.save(str(path), "PNG")
    return path


class TestFitRect:
    """Test the aspect-preserving placement."""

    def test_small_image_is_not_upscaled(self):
        assert fit_rect(800, 600, 200, 100) == (300, 250, 200, 100)

    def test_wide_image_is_fitted_to_width(self):
        assert fit_rect(400, 400, 800, 200) == (0, 150, 400, 100)

    def test_tall_image_is_fitted_to_height(self):
        assert fit_rect(400, 400, 200, 800) == (150, 0, 100, 400)

    def test_exact_fit(self):
        assert fit_rect(300, 200, 300, 200) == (0, 0, 300, 200)

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, -1)])
    def test_degenerate_image(self, width, height):
        assert fit_rect(100, 100, width, height) == (0, 0, 0, 0)


class TestImagePreview:
    """Test loading and painting."""

    def test_starts_empty(self, qtbot):
        preview = ImagePreview()
        qtbot.addWidget(preview)

        assert preview.has_image() is False
        assert preview.image is None

    def test_load_valid_image(self, qtbot, tmp_path):
        preview = ImagePreview()
        qtbot.addWidget(preview)
        path = write_png(tmp_path / "photo.png")

        image = preview.load_image(path)

        assert preview.has_image() is True
        assert (image.width(), image.height()) == (64, 48)

    def test_load_missing_file(self, qtbot, tmp_path):
        preview = ImagePreview()
        qtbot.addWidget(preview)

        with pytest.raises(FileError) as exc_info:
            preview.load_image(tmp_path / "missing.png")

        assert exc_info.value.code == ErrorCode.FILE_NOT_FOUND
        assert exc_info.value.user_message == "Error: File not found"

    def test_load_garbage_keeps_current_image(self, qtbot, tmp_path):
        preview = ImagePreview()
        qtbot.addWidget(preview)
        good = preview.load_image(write_png(tmp_path / "good.png"))
        garbage = tmp_path / "broken.png"
        garbage.write_bytes(b"this is not a png")

        with pytest.raises(FileError) as exc_info:
            preview.load_image(garbage)

        assert exc_info.value.code == ErrorCode.FILE_UNREADABLE
        assert exc_info.value.user_message == "Error loading image: broken.png"
        assert preview.image is good

    def test_paints_dark_background(self, qtbot):
        preview = ImagePreview()
        qtbot.addWidget(preview)
        preview.resize(200, 150)

        rendered = preview.grab().toImage()

        assert rendered.pixelColor(2, 2) == QColor(40, 44, 52)

    def test_paints_loaded_image_centered(self, qtbot, tmp_path):
        preview = ImagePreview()
        qtbot.addWidget(preview)
        preview.resize(200, 150)
        preview.load_image(write_png(tmp_path / "photo.png", 64, 48, Qt.GlobalColor.red))

        rendered = preview.grab().toImage()

        assert rendered.pixelColor(100, 75) == QColor(255, 0, 0)
        assert rendered.pixelColor(2, 2) == QColor(40, 44, 52)
