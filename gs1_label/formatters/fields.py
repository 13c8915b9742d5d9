"""
GS1 field formatting for label data.

- Dates (AI 11, 13, 15, 17): YYMMDD
- Weights (AI 310n, 320n): 6 digits with n implied decimal places
- Quantities (AI 37): 6 digits, zero-padded
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

from dateutil import parser as date_parser

from ..errors import InvalidInputError

logger = logging.getLogger(__name__)

FIELD_WIDTH = 6
MAX_DECIMAL_PLACES = 6
EMPTY_FIELD = "0" * FIELD_WIDTH

# Fields missing from a partial date string ("March 2024") come from here
_DEFAULT_DATE = datetime(2000, 1, 1)


def parse_date(value: Any) -> Optional[date]:
    """
    Coerce a date, datetime or date-like string to a date object.

    Returns None when the value cannot be read as a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return date_parser.parse(value.strip(), default=_DEFAULT_DATE).date()
    except (ValueError, OverflowError):
        logger.debug("Unparseable date value: %r", value)
        return None


def format_gs1_date(value: Any) -> str:
    """
    Format a date as GS1 YYMMDD.

    The year is reduced to its last two digits. Timezone-aware datetimes
    are formatted with their own fields; convert beforehand if UTC is wanted.

    Args:
        value: date, datetime or parseable date string

    Returns:
        6-digit date string, or "" if the value is not a date
    """
    parsed = parse_date(value)
    if parsed is None:
        return ""
    return f"{parsed.year % 100:02d}{parsed.month:02d}{parsed.day:02d}"


def parse_number(value: Any) -> Optional[Decimal]:
    """Read a number as a finite Decimal, or None if it is not one."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        # str() gives the shortest repr, so 1.005 stays 1.005 and not 1.00499...
        number = Decimal(str(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None
    return number if number.is_finite() else None


def format_gs1_weight(value: Any, decimal_places: int = 0) -> str:
    """
    Format a weight/measure for AIs 310n-316n, 320n, etc.

    The value is multiplied by 10^decimal_places, rounded half-up and
    zero-padded to 6 digits.

    Example: format_gs1_weight(12.5, 1) -> "000125"

    Args:
        value: int, float, Decimal or numeric string
        decimal_places: Implied decimal positions (0-6)

    Returns:
        6-digit string; "000000" if value is missing or not numeric

    Raises:
        InvalidInputError: if decimal_places is out of range, or the value
            is negative or needs more than 6 digits
    """
    if (isinstance(decimal_places, bool) or not isinstance(decimal_places, int)
            or not 0 <= decimal_places <= MAX_DECIMAL_PLACES):
        raise InvalidInputError(
            f"Decimal places must be an integer 0-{MAX_DECIMAL_PLACES}, got {decimal_places!r}"
        )

    number = parse_number(value)
    if number is None:
        return EMPTY_FIELD

    if number < 0:
        raise InvalidInputError(f"Value must not be negative, got {value!r}")

    scaled = number.scaleb(decimal_places)
    # Compare by magnitude: a zero with an exponent (0E+6) still fits
    if scaled >= 10 ** FIELD_WIDTH:
        raise InvalidInputError(
            f"Value {value!r} with {decimal_places} decimal places exceeds {FIELD_WIDTH} digits"
        )

    rounded = int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    if rounded >= 10 ** FIELD_WIDTH:
        # 999999.5 and above round up to seven digits
        raise InvalidInputError(
            f"Value {value!r} with {decimal_places} decimal places exceeds {FIELD_WIDTH} digits"
        )

    return f"{rounded:0{FIELD_WIDTH}d}"


def format_gs1_quantity(value: Any) -> str:
    """
    Format a count of trade items (AI 37) as a 6-digit field.

    Returns "000000" for None. Raises InvalidInputError for anything that
    is not a whole number, and for negative or oversized counts.
    """
    if value is None:
        return EMPTY_FIELD

    number = parse_number(value)
    if number is None or number != number.to_integral_value():
        raise InvalidInputError(f"Quantity must be a whole number, got {value!r}")

    return format_gs1_weight(number, 0)
