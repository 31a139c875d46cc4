"""
Main entry point for the NimFinder application.
"""

import logging
import sys

from PySide6.QtWidgets import QApplication

from core.config import setup_qsettings
from core.error_handler import init_logging, setup_error_handling
from core.jxl_tools import find_missing_tools, tools_unavailable_error
from gui.dialogs.error_dialogs import show_tools_missing_dialog
from gui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    """Main application entry point."""
    app = QApplication.instance() or QApplication(sys.argv)
    setup_qsettings()
    init_logging()
    error_handler = setup_error_handling()

    # The main window is only built when both libjxl tools run
    missing = find_missing_tools()
    if missing:
        error = tools_unavailable_error(missing)
        logger.error(error.user_message)
        show_tools_missing_dialog(error)
        error_handler.restore_hooks()
        return 1

    window = MainWindow()
    window.show()

    try:
        return app.exec()
    finally:
        window.session.close()
        error_handler.restore_hooks()


if __name__ == "__main__":
    raise SystemExit(main())
