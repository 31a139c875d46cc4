"""
Centralized error taxonomy for NimFinder.

This module provides the error categories, codes and exception hierarchy
used to report failures consistently, whether they end up in the status
bar or in the blocking startup dialog.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ErrorType(Enum):
    """Error type categories for consistent error handling."""

    FILE = "file"
    CONVERSION = "conversion"
    DEPENDENCY = "dependency"
    VALIDATION = "validation"
    SYSTEM = "system"


class ErrorCode(Enum):
    """Specific error codes for common scenarios."""

    # File-related errors
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    FILE_UNREADABLE = "FILE_UNREADABLE"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"

    # External tool errors
    DECODE_FAILED = "DECODE_FAILED"
    ENCODE_FAILED = "ENCODE_FAILED"
    TOOLS_UNAVAILABLE = "TOOLS_UNAVAILABLE"

    # Validation errors
    QUALITY_PARSE_FAILED = "QUALITY_PARSE_FAILED"
    VALUE_OUT_OF_RANGE = "VALUE_OUT_OF_RANGE"

    # System errors
    OS_ERROR = "OS_ERROR"
    MEMORY_ERROR = "MEMORY_ERROR"

    # Generic
    UNKNOWN = "UNKNOWN"


class ErrorSeverity(Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class BaseAppError(Exception):
    """
    Base application error with structured metadata.

    This is the root of all custom application errors. The user message is
    what ends up in the status bar or dialog; the technical message carries
    diagnostics such as captured tool output.
    """

    type: ErrorType
    code: ErrorCode
    user_message: str
    technical_message: str | None = None
    severity: ErrorSeverity = ErrorSeverity.MEDIUM
    retriable: bool = False
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Return user-friendly error message."""
        return self.user_message

    def __repr__(self) -> str:
        """Return detailed error representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"type={self.type.value}, "
            f"code={self.code.value}, "
            f"message='{self.user_message}'"
            f")"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "type": self.type.value,
            "code": self.code.value,
            "user_message": self.user_message,
            "technical_message": self.technical_message,
            "severity": self.severity.value,
            "retriable": self.retriable,
            "context": self.context,
        }


class FileError(BaseAppError):
    """File system and file format errors."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        retriable: bool = False,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.FILE,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            retriable=retriable,
            context=context or {},
        )


class ConversionError(BaseAppError):
    """Encoder and decoder failures (non-zero exit of cjxl/djxl)."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        retriable: bool = True,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.CONVERSION,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            retriable=retriable,
            context=context or {},
        )


class DependencyError(BaseAppError):
    """Missing external tools."""

    def __init__(
        self,
        missing: list[str],
        user_message: str,
        help_url: str | None = None,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.CRITICAL,
        context: dict[str, Any] | None = None,
    ):
        context = context or {}
        context["missing"] = list(missing)
        if help_url:
            context["help_url"] = help_url

        super().__init__(
            type=ErrorType.DEPENDENCY,
            code=ErrorCode.TOOLS_UNAVAILABLE,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            retriable=False,
            context=context,
        )

    @property
    def missing(self) -> list[str]:
        """Names of the tools that could not be run."""
        return list(self.context.get("missing", []))

    @property
    def help_url(self) -> str | None:
        """Where the user can download the missing tools."""
        return self.context.get("help_url")


class SystemError(BaseAppError):
    """Operating system and unexpected errors."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        retriable: bool = False,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.SYSTEM,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            retriable=retriable,
            context=context or {},
        )


class ValidationError(BaseAppError):
    """Input validation related errors."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        field: str | None = None,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.LOW,
        retriable: bool = False,
        context: dict[str, Any] | None = None,
    ):
        context = context or {}
        if field:
            context["field"] = field

        super().__init__(
            type=ErrorType.VALIDATION,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            retriable=retriable,
            context=context,
        )

    @property
    def field(self) -> str | None:
        """Get the field that caused the validation error."""
        return self.context.get("field")


# Exception mapping configuration
_EXCEPTION_MAPPING: dict[type[Exception], tuple[ErrorType, ErrorCode, str]] = {
    FileNotFoundError: (ErrorType.FILE, ErrorCode.FILE_NOT_FOUND, "File not found"),
    PermissionError: (ErrorType.FILE, ErrorCode.PERMISSION_DENIED, "Permission denied"),
    OSError: (ErrorType.SYSTEM, ErrorCode.OS_ERROR, "System error occurred"),
    MemoryError: (ErrorType.SYSTEM, ErrorCode.MEMORY_ERROR, "Insufficient memory"),
}


def map_exception(exc: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
    """
    Map a built-in exception to a custom application error.

    Args:
        exc: The exception to map
        context: Optional context information

    Returns:
        BaseAppError instance with appropriate type and metadata
    """
    context = context or {}

    if isinstance(exc, BaseAppError):
        return exc

    exc_type = type(exc)
    if exc_type in _EXCEPTION_MAPPING:
        error_type, error_code, default_message = _EXCEPTION_MAPPING[exc_type]
        user_message = str(exc) if str(exc) else default_message
        technical_message = f"{exc_type.__name__}: {exc}"

        if error_type == ErrorType.FILE:
            return FileError(
                code=error_code, user_message=user_message, technical_message=technical_message, context=context
            )
        return SystemError(
            code=error_code, user_message=user_message, technical_message=technical_message, context=context
        )

    # Fallback for unknown exceptions
    logger.warning(f"Unknown exception type: {exc_type.__name__}: {exc}")
    return SystemError(
        code=ErrorCode.UNKNOWN,
        user_message="An unexpected error occurred",
        technical_message=f"{exc_type.__name__}: {exc}",
        context=context,
    )


def from_exception(exc: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
    """Convert any exception to a BaseAppError (alias for map_exception)."""
    return map_exception(exc, context)
