"""
Tests for image file classification and size formatting.
"""

from pathlib import Path

import pytest

from core.image_utils import (
    build_open_dialog_filter,
    classify_file,
    format_size,
    get_image_info,
    is_jxl_file,
    is_supported_input,
)


class TestClassifyFile:
    """Test classify_file and the extension helpers."""

    @pytest.mark.parametrize("name", ["a.png", "a.jpg", "a.jpeg", "a.gif", "a.bmp", "a.ppm", "a.pgm"])
    def test_supported_inputs(self, name):
        """Every supported raster extension is accepted and not treated as JXL."""
        result = classify_file(name)
        assert result.is_supported_input is True
        assert result.is_jxl is False
        assert result.is_recognized is True

    @pytest.mark.parametrize("name", ["PHOTO.PNG", "Photo.JpEg", "scan.PGM"])
    def test_supported_inputs_case_insensitive(self, name):
        """Extension matching ignores case."""
        assert classify_file(name).is_supported_input is True

    @pytest.mark.parametrize("name", ["image.jxl", "IMAGE.JXL", "image.JxL", ".jxl", "/pics/.JXL"])
    def test_jxl_any_case(self, name):
        """JXL is recognised in any case and is not a conversion input."""
        result = classify_file(name)
        assert result.is_jxl is True
        assert result.is_supported_input is False

    @pytest.mark.parametrize("name", ["document.txt", "archive.png.zip", "noextension", "image.webp", "jxl"])
    def test_unsupported(self, name):
        """Anything else is rejected."""
        result = classify_file(name)
        assert result.is_jxl is False
        assert result.is_supported_input is False
        assert result.is_recognized is False

    def test_accepts_path_objects(self, tmp_path):
        """Path objects work the same as strings."""
        assert is_jxl_file(tmp_path / "x.jxl")
        assert is_supported_input(Path("/pictures/x.bmp"))


class TestFormatSize:
    """Test format_size."""

    def test_megabytes(self):
        assert format_size(2 * 1024 * 1024) == "2 MB"

    def test_kilobytes_truncate(self):
        """Integer division truncates rather than rounds."""
        assert format_size(1536) == "1 KB"

    def test_bytes(self):
        assert format_size(500) == "500 bytes"

    def test_boundaries(self):
        """Exactly 1 KiB and 1 MiB switch units."""
        assert format_size(1023) == "1023 bytes"
        assert format_size(1024) == "1 KB"
        assert format_size(1024 * 1024 - 1) == "1023 KB"
        assert format_size(1024 * 1024) == "1 MB"
        assert format_size(0) == "0 bytes"


class TestGetImageInfo:
    """Test get_image_info."""

    def test_existing_file(self, tmp_path):
        image = tmp_path / "photo.png"
        image.write_bytes(b"x" * 2048)

        info = get_image_info(image)

        assert info["name"] == "photo.png"
        assert info["size"] == 2048
        assert info["size_text"] == "2 KB"
        assert info["is_jxl"] is False

    def test_missing_file(self, tmp_path):
        info = get_image_info(tmp_path / "missing.png")
        assert info == {"error": "File does not exist"}


def test_open_dialog_filter_lists_all_formats():
    """The dialog filter offers every openable extension plus All Files."""
    name_filter = build_open_dialog_filter()
    for ext in (".png", ".jpg", ".jpeg", ".gif", ".bmp", ".ppm", ".pgm", ".jxl"):
        assert f"*{ext}" in name_filter
    assert name_filter.endswith("All Files (*)")
