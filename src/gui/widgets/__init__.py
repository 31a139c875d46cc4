"""
Reusable GUI widgets for the NimFinder application.

This module contains custom widgets that can be reused across different
parts of the application.
"""

from .preview import ImagePreview

__all__ = ["ImagePreview"]
