"""
Tests for the error taxonomy.
"""

from core.errors import (
    BaseAppError,
    ConversionError,
    DependencyError,
    ErrorCode,
    ErrorSeverity,
    ErrorType,
    FileError,
    SystemError,
    ValidationError,
    from_exception,
    map_exception,
)


class TestErrorClasses:
    """Test the error subclasses and their defaults."""

    def test_file_error(self):
        error = FileError(code=ErrorCode.UNSUPPORTED_FORMAT, user_message="Unsupported file format: a.txt")

        assert isinstance(error, BaseAppError)
        assert isinstance(error, Exception)
        assert error.type == ErrorType.FILE
        assert str(error) == "Unsupported file format: a.txt"
        assert error.retriable is False

    def test_conversion_error_is_retriable(self):
        error = ConversionError(code=ErrorCode.ENCODE_FAILED, user_message="Conversion failed: boom")

        assert error.type == ErrorType.CONVERSION
        assert error.severity == ErrorSeverity.HIGH
        assert error.retriable is True

    def test_dependency_error(self):
        error = DependencyError(
            missing=["cjxl", "djxl"],
            user_message="tools missing",
            help_url="https://github.com/libjxl/libjxl/releases",
        )

        assert error.code == ErrorCode.TOOLS_UNAVAILABLE
        assert error.type == ErrorType.DEPENDENCY
        assert error.severity == ErrorSeverity.CRITICAL
        assert error.missing == ["cjxl", "djxl"]
        assert error.help_url == "https://github.com/libjxl/libjxl/releases"

    def test_validation_error_field(self):
        error = ValidationError(code=ErrorCode.QUALITY_PARSE_FAILED, user_message="bad", field="quality")

        assert error.field == "quality"
        assert error.severity == ErrorSeverity.LOW

    def test_to_dict_and_repr(self):
        error = FileError(code=ErrorCode.FILE_NOT_FOUND, user_message="Error: File not found", context={"path": "/x"})

        data = error.to_dict()
        assert data["type"] == "file"
        assert data["code"] == "FILE_NOT_FOUND"
        assert data["context"] == {"path": "/x"}
        assert "FILE_NOT_FOUND" in repr(error)


class TestMapException:
    """Test mapping built-in exceptions to application errors."""

    def test_existing_app_error_returned_unchanged(self):
        error = FileError(code=ErrorCode.FILE_NOT_FOUND, user_message="missing")
        assert map_exception(error) is error

    def test_file_not_found(self):
        result = map_exception(FileNotFoundError("no such file"))

        assert isinstance(result, FileError)
        assert result.code == ErrorCode.FILE_NOT_FOUND
        assert result.user_message == "no such file"
        assert result.technical_message == "FileNotFoundError: no such file"

    def test_permission_error(self):
        result = map_exception(PermissionError())

        assert result.code == ErrorCode.PERMISSION_DENIED
        assert result.user_message == "Permission denied"

    def test_os_error(self):
        result = map_exception(OSError("disk gone"))

        assert isinstance(result, SystemError)
        assert result.code == ErrorCode.OS_ERROR

    def test_unknown_exception(self):
        result = from_exception(RuntimeError("weird"), {"source": "test"})

        assert result.code == ErrorCode.UNKNOWN
        assert result.user_message == "An unexpected error occurred"
        assert result.context == {"source": "test"}
