"""
Dialog windows for the NimFinder application.

This module contains dialog windows and modal interfaces.
"""

from .error_dialogs import build_tools_missing_dialog, show_tools_missing_dialog

__all__ = ["build_tools_missing_dialog", "show_tools_missing_dialog"]
