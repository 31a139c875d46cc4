"""
Tests for quality field validation.
"""

import pytest

from core.errors import ErrorCode, ValidationError
from core.validation import parse_quality, resolve_quality


class TestParseQuality:
    """Test strict parsing of the quality field."""

    @pytest.mark.parametrize("text,expected", [("1", 1), ("85", 85), ("100", 100), ("007", 7)])
    def test_valid_values(self, text, expected):
        assert parse_quality(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "8.5", " 85", "85 ", "+85", "8_5", "٨٥", "85%"])
    def test_non_integers_rejected(self, text):
        """Anything that is not a plain integer is a parse failure."""
        with pytest.raises(ValidationError) as exc_info:
            parse_quality(text)
        assert exc_info.value.code == ErrorCode.QUALITY_PARSE_FAILED
        assert exc_info.value.field == "quality"

    @pytest.mark.parametrize("text", ["0", "101", "-5", "1000"])
    def test_out_of_range_rejected(self, text):
        with pytest.raises(ValidationError) as exc_info:
            parse_quality(text)
        assert exc_info.value.code == ErrorCode.VALUE_OUT_OF_RANGE


class TestResolveQuality:
    """Test the fallback to the default quality."""

    def test_valid_value_kept(self):
        assert resolve_quality("42") == (42, False)

    @pytest.mark.parametrize("text", ["abc", "0", "101", "-1", "", " 90", "1e2"])
    def test_invalid_values_reset_to_default(self, text):
        """Every invalid or out-of-range input resolves to exactly 85."""
        assert resolve_quality(text) == (85, True)
