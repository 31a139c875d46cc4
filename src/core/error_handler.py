"""
Error reporting and log setup for NimFinder.

ErrorHandler is a process-wide QObject. Every reported error goes through
handle(): it is normalized to a BaseAppError, written to the rotating log
and broadcast on errorOccurred, which the main window turns into status text.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
import traceback
from typing import Any, ClassVar

from PySide6.QtCore import QObject, Signal

from .config import get_app_data_dir, get_log_level
from .errors import BaseAppError, from_exception

LOG_FILE_NAME = "app.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5
MAX_CONTEXT_ITEMS = 20
MAX_CONTEXT_VALUE_LENGTH = 200


class ErrorHandler(QObject):
    """
    Singleton that logs application errors and announces them to the UI.

    Listeners connect to errorOccurred; the payload is the BaseAppError.
    """

    errorOccurred = Signal(object)  # BaseAppError

    _instance: ClassVar[ErrorHandler | None] = None
    _logger: ClassVar[logging.Logger | None] = None

    def __new__(cls) -> ErrorHandler:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        # __init__ runs on every ErrorHandler() call; set up only once
        if hasattr(self, "_initialized"):
            return

        super().__init__()
        self._initialized = True
        self._original_excepthook = sys.excepthook

        self._setup_logging()

    def capture(self, exception: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
        """
        Turn any exception into a BaseAppError carrying diagnostic context.

        Args:
            exception: Exception raised or built by the caller
            context: Extra key/value pairs for the log record

        Returns:
            The normalized error; an existing BaseAppError is returned as-is
            with the context merged into it
        """
        safe_context = self._sanitize_context(context or {})

        app_error = from_exception(exception, safe_context)
        for key, value in safe_context.items():
            app_error.context.setdefault(key, value)

        if not app_error.technical_message:
            app_error.technical_message = f"{type(exception).__name__}: {exception}"

        if "traceback" not in app_error.context:
            if exception.__traceback__ is not None:
                tb_text = "".join(traceback.format_exception(type(exception), exception, exception.__traceback__))
            else:
                tb_text = f"{type(exception).__name__}: {exception}\n"
            app_error.context["traceback"] = tb_text

        return app_error

    def handle(self, exception: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
        """
        Log an error and emit errorOccurred.

        SystemExit and KeyboardInterrupt are re-raised untouched.
        """
        if isinstance(exception, SystemExit | KeyboardInterrupt):
            raise exception

        app_error = self.capture(exception, context)

        if self._logger:
            self._logger.error(
                f"[{app_error.code.value}] {app_error.user_message}",
                extra={
                    "app_code": app_error.code.value,
                    "error_type": app_error.type.value,
                    "severity": app_error.severity.value,
                    "retriable": app_error.retriable,
                },
                exc_info=None if isinstance(exception, BaseAppError) else exception,
            )
            if app_error.technical_message:
                self._logger.debug(app_error.technical_message, extra={"app_code": app_error.code.value})

        self.errorOccurred.emit(app_error)
        return app_error

    def _setup_logging(self) -> None:
        """Attach the rotating log file under <AppDataLocation>/logs."""
        try:
            logs_dir = get_app_data_dir() / "logs"
            logs_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logging.getLogger(__name__).warning(f"Cannot create log directory, error log disabled: {e}")
            return

        ErrorHandler._logger = logging.getLogger("nimfinder.errors")
        ErrorHandler._logger.setLevel(logging.DEBUG)
        ErrorHandler._logger.propagate = False

        if ErrorHandler._logger.handlers:
            return

        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | code=%(app_code)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler = logging.handlers.RotatingFileHandler(
            logs_dir / LOG_FILE_NAME,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        ErrorHandler._logger.addHandler(file_handler)

        if __debug__:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            console_handler.setLevel(logging.WARNING)
            ErrorHandler._logger.addHandler(console_handler)

    def _sanitize_context(self, context: dict[str, Any]) -> dict[str, Any]:
        """Cap the number and length of context entries written to the log."""
        safe_context: dict[str, Any] = {}

        for index, (key, value) in enumerate(context.items()):
            if index >= MAX_CONTEXT_ITEMS:
                safe_context["..."] = f"({len(context) - MAX_CONTEXT_ITEMS} more items truncated)"
                break

            text = value if isinstance(value, str) else repr(value)
            if len(text) > MAX_CONTEXT_VALUE_LENGTH:
                text = text[:MAX_CONTEXT_VALUE_LENGTH] + "..."
            safe_context[key] = text

        return safe_context

    def install_hooks(self) -> None:
        """Route uncaught exceptions through handle() so they reach the log and the status line."""

        def exception_hook(exc_type: type[BaseException], exc_value: BaseException, exc_traceback: Any) -> None:
            if not isinstance(exc_value, Exception):
                self._original_excepthook(exc_type, exc_value, exc_traceback)
                return
            self.handle(exc_value, {"source": "sys.excepthook"})

        sys.excepthook = exception_hook

    def restore_hooks(self) -> None:
        """Put back the exception hook that was active before install_hooks()."""
        sys.excepthook = self._original_excepthook


def get_error_handler() -> ErrorHandler:
    """Return the process-wide ErrorHandler."""
    return ErrorHandler()


def setup_error_handling() -> ErrorHandler:
    """Create the ErrorHandler and install the exception hook; call once at startup."""
    handler = get_error_handler()
    handler.install_hooks()
    return handler


def init_logging() -> None:
    """
    Configure root logging from NIMFINDER_LOG_LEVEL.

    Call after setup_qsettings() so the error log lands in this
    application's data directory.
    """
    get_error_handler()

    logging.basicConfig(
        level=getattr(logging, get_log_level()),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
