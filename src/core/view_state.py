"""
View state management for NimFinder.

This module defines the states of the main window, keyed by what is
currently loaded in the preview.
"""

from enum import Enum, auto


class ViewState(Enum):
    """
    Enumeration of view states.

    These states decide which actions are available and are used to
    coordinate UI updates with the session.
    """

    EMPTY = auto()  # Nothing opened, convert disabled
    VIEWING_SOURCE = auto()  # Raster opened directly, convert enabled
    VIEWING_JXL_PREVIEW = auto()  # JXL decoded to a temp preview, convert disabled
