"""
Validation for the quality input field.

The field is free text. Anything other than a plain integer in [1, 100]
is rejected and the caller falls back to the default quality.
"""

from __future__ import annotations

import logging
import re

from .config import DEFAULT_QUALITY, MAX_QUALITY, MIN_QUALITY
from .errors import ErrorCode, ValidationError

logger = logging.getLogger(__name__)

_STRICT_INT_RE = re.compile(r"-?[0-9]+")


def parse_quality(text: str) -> int:
    """
    Parse the quality field strictly.

    Args:
        text: Raw field text; surrounding whitespace is not accepted

    Returns:
        The quality value

    Raises:
        ValidationError: If the text is not an integer or is out of range
    """
    if not _STRICT_INT_RE.fullmatch(text):
        raise ValidationError(
            code=ErrorCode.QUALITY_PARSE_FAILED,
            user_message=f"Quality must be a whole number, got '{text}'",
            field="quality",
        )

    value = int(text)
    if not MIN_QUALITY <= value <= MAX_QUALITY:
        raise ValidationError(
            code=ErrorCode.VALUE_OUT_OF_RANGE,
            user_message=f"Quality must be between {MIN_QUALITY} and {MAX_QUALITY}, got {value}",
            field="quality",
        )
    return value


def resolve_quality(text: str) -> tuple[int, bool]:
    """
    Resolve the effective quality for a conversion.

    Returns:
        Tuple of (quality, corrected). When corrected is True the quality is
        the default and the input field should be rewritten to show it.
    """
    try:
        return parse_quality(text), False
    except ValidationError as e:
        logger.warning(f"{e.user_message}; using {DEFAULT_QUALITY}")
        return DEFAULT_QUALITY, True
