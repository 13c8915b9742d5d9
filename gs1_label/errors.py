"""
Error and warning types for the GS1 label toolkit.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Error and warning codes."""
    UNKNOWN_AI = "UNKNOWN_AI"
    INVALID_LENGTH = "INVALID_LENGTH"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_CHECK_DIGIT = "INVALID_CHECK_DIGIT"
    INVALID_DATE = "INVALID_DATE"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"


class InvalidInputError(ValueError):
    """
    Raised for input that cannot be encoded: malformed digit strings,
    an SSCC company prefix that leaves no room, or a field value that does
    not fit its fixed width.
    """


class UnknownIdentifierWarning(UserWarning):
    """Issued when an element key is neither a named field nor a numeric AI."""
