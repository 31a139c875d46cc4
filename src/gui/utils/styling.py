"""
Shared styling utilities for the NimFinder GUI.

This module contains the color palette and stylesheet helpers used by the
toolbar, status bar and preview surface.
"""

from typing import Any, Protocol

from PySide6.QtGui import QColor


class StyleableWidget(Protocol):
    """Protocol for widgets that can be styled."""

    def setStyleSheet(self, styleSheet: str) -> None: ...
    def style(self) -> Any: ...


class AccessiblePalette:
    """
    Centralized color palette.

    Status colors meet a minimum contrast ratio of 4.5:1 on their backgrounds.
    """

    # Preview surface
    PREVIEW_BACKGROUND = (40, 44, 52)
    PREVIEW_PLACEHOLDER_TEXT = (150, 150, 150)

    # Status colors
    STATUS_SUCCESS_TEXT = "#198754"
    STATUS_ERROR_TEXT = "#721c24"
    STATUS_ERROR_BG = "#f8d7da"

    BORDER_DEFAULT = "#dee2e6"
    BORDER_ERROR = "#dc3545"
    BORDER_SUCCESS = "#198754"

    BACKGROUND_SECONDARY = "#f8f9fa"
    TEXT_SECONDARY = "#6c757d"


class StyleSheets:
    """Collection of reusable stylesheet definitions using the accessible palette."""

    @staticmethod
    def get_status_label_style(status: str = "default") -> str:
        """Get status label stylesheet for the given status."""
        styles = {
            "success": f"""
                QLabel {{
                    color: {AccessiblePalette.STATUS_SUCCESS_TEXT};
                    padding: 4px 8px;
                    background-color: {AccessiblePalette.BACKGROUND_SECONDARY};
                    border: 1px solid {AccessiblePalette.BORDER_SUCCESS};
                    border-radius: 4px;
                }}
            """,
            "error": f"""
                QLabel {{
                    color: {AccessiblePalette.STATUS_ERROR_TEXT};
                    padding: 4px 8px;
                    background-color: {AccessiblePalette.STATUS_ERROR_BG};
                    border: 1px solid {AccessiblePalette.BORDER_ERROR};
                    border-radius: 4px;
                }}
            """,
            "default": f"""
                QLabel {{
                    color: {AccessiblePalette.TEXT_SECONDARY};
                    padding: 4px 8px;
                    background-color: {AccessiblePalette.BACKGROUND_SECONDARY};
                    border: 1px solid {AccessiblePalette.BORDER_DEFAULT};
                    border-radius: 4px;
                }}
            """,
        }
        return styles.get(status, styles["default"])


def preview_background_color() -> QColor:
    """Fill color of the preview surface."""
    return QColor(*AccessiblePalette.PREVIEW_BACKGROUND)


def placeholder_text_color() -> QColor:
    """Color of the placeholder text shown when no image is loaded."""
    return QColor(*AccessiblePalette.PREVIEW_PLACEHOLDER_TEXT)


def apply_status_style(widget: StyleableWidget, status: str = "default") -> None:
    """
    Apply status-based styling to a widget.

    Args:
        widget: The widget to style
        status: Status type ("default", "success", "error")
    """
    widget.setStyleSheet(StyleSheets.get_status_label_style(status))
