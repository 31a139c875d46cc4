"""
Image file classification and size formatting utilities.

This module decides, by extension only, whether a path is a JPEG XL file,
a raster the encoder accepts, or something the application rejects.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .config import JXL_EXTENSION, SUPPORTED_INPUT_FORMATS

KIB = 1024
MIB = 1024 * 1024


@dataclass(frozen=True)
class FileClassification:
    """Result of classifying a path by its extension."""

    is_jxl: bool
    is_supported_input: bool

    @property
    def is_recognized(self) -> bool:
        """True when the file can be opened at all."""
        return self.is_jxl or self.is_supported_input


def _lower_name(path: str | Path) -> str:
    return Path(path).name.lower()


def is_jxl_file(path: str | Path) -> bool:
    """Check if a path has the JPEG XL extension (case-insensitive)."""
    return _lower_name(path).endswith(JXL_EXTENSION)


def is_supported_input(path: str | Path) -> bool:
    """Check if a path has one of the raster extensions the encoder accepts."""
    return _lower_name(path).endswith(SUPPORTED_INPUT_FORMATS)


def classify_file(path: str | Path) -> FileClassification:
    """
    Classify a file by extension.

    Args:
        path: Path to classify; the file does not need to exist

    Returns:
        FileClassification; both flags are False for unsupported files
    """
    return FileClassification(is_jxl=is_jxl_file(path), is_supported_input=is_supported_input(path))


def format_size(num_bytes: int) -> str:
    """
    Render a byte count as whole MB, KB or bytes.

    Uses truncating integer division, so 1536 bytes is "1 KB".
    """
    if num_bytes >= MIB:
        return f"{num_bytes // MIB} MB"
    if num_bytes >= KIB:
        return f"{num_bytes // KIB} KB"
    return f"{num_bytes} bytes"


def get_image_info(path: Path) -> dict[str, Any]:
    """
    Get basic information about an image file.

    Args:
        path: Path to the image file

    Returns:
        Dictionary with name, size and formatted size, or an "error" entry
    """
    try:
        if not path.exists():
            return {"error": "File does not exist"}

        size = path.stat().st_size
        return {
            "name": path.name,
            "size": size,
            "size_text": format_size(size),
            "path": str(path),
            "is_jxl": is_jxl_file(path),
        }
    except OSError as e:
        return {"error": f"Cannot access file: {e}"}


def build_open_dialog_filter() -> str:
    """Build the QFileDialog name filter for every format the app can open."""
    patterns = " ".join(f"*{ext}" for ext in (*SUPPORTED_INPUT_FORMATS, JXL_EXTENSION))
    return f"Images ({patterns});;JPEG XL (*{JXL_EXTENSION});;All Files (*)"
