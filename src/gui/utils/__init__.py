"""
GUI-specific utilities for the NimFinder application.

This module contains utility functions and classes that are specific
to the GUI implementation.
"""

from .styling import (
    AccessiblePalette,
    StyleSheets,
    apply_status_style,
    placeholder_text_color,
    preview_background_color,
)

__all__ = [
    "AccessiblePalette",
    "StyleSheets",
    "apply_status_style",
    "placeholder_text_color",
    "preview_background_color",
]
