"""
Session state for one running NimFinder window.

The session tracks the opened file, the decoded temp preview of a JXL
source and the quality setting. It owns the temp preview file and deletes
it before replacing it and when the window closes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import DEFAULT_QUALITY
from .jxl_tools import clamp_quality
from .view_state import ViewState

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """Mutable context for the main window."""

    current_source_path: Path | None = None
    temp_preview_path: Path | None = None
    quality: int = DEFAULT_QUALITY
    view_state: ViewState = ViewState.EMPTY

    @property
    def can_convert(self) -> bool:
        """Conversion is only offered for a directly viewed raster source."""
        return self.view_state == ViewState.VIEWING_SOURCE and self.current_source_path is not None

    def set_quality(self, quality: int) -> None:
        """Store a quality value, clamped to [1, 100]."""
        self.quality = clamp_quality(quality)

    def open_source(self, path: Path) -> None:
        """Record a raster opened for direct viewing."""
        self.current_source_path = path
        self.temp_preview_path = None
        self.view_state = ViewState.VIEWING_SOURCE

    def open_jxl_preview(self, jxl_path: Path, temp_path: Path) -> None:
        """Record a JXL source together with its decoded temp preview."""
        if self.temp_preview_path is not None and self.temp_preview_path != temp_path:
            self.release_preview()
        self.current_source_path = jxl_path
        self.temp_preview_path = temp_path
        self.view_state = ViewState.VIEWING_JXL_PREVIEW

    def release_preview(self) -> None:
        """Delete the temp preview file, if any. Failures are logged, not raised."""
        if self.temp_preview_path is None:
            return

        remove_temp_file(self.temp_preview_path)
        self.temp_preview_path = None

    def close(self) -> None:
        """Release everything the session owns."""
        self.release_preview()


def remove_temp_file(path: Path) -> bool:
    """
    Delete a temp file best-effort.

    Returns:
        True if the file is gone afterwards
    """
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Could not delete temp preview {path}: {e}")
        return False
    logger.debug(f"Deleted temp preview {path}")
    return True
