"""
GS1 Identifier Validation

Check digit computation and structural validation for the identifiers
printed on logistic labels:
- Mod10 check digit (GTIN, SSCC, GLN, ...)
- GTIN-14 and SSCC-18 validation
- Lot/batch number validation (AI 10)

The boolean validators never raise; the check_* variants return a
ValidationResult explaining why a value was rejected.

Based on GS1 General Specifications section 7.9 (check digit calculation).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..errors import ErrorCode, InvalidInputError


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


NUMERIC = frozenset('0123456789')

# Lot numbers printed on labels are restricted to plain ASCII letters and digits
ALPHANUMERIC = frozenset(
    '0123456789'
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
    'abcdefghijklmnopqrstuvwxyz'
)

GTIN_LENGTH = 14
SSCC_LENGTH = 18
LOT_MAX_LENGTH = 20


def _is_digit_string(value: Any) -> bool:
    # str.isdigit() accepts non-ASCII digits such as '²', so check the set
    return isinstance(value, str) and bool(value) and all(c in NUMERIC for c in value)


def compute_check_digit(digits: str) -> int:
    """
    Calculate GS1 Mod10 check digit.

    Algorithm (GS1 General Specifications):
    1. From right to left, alternate multipliers 3 and 1
    2. Sum all products
    3. Check digit = (10 - (sum mod 10)) mod 10

    For the 13-digit GTIN body and the 17-digit SSCC body this is the
    same as weighting even (0-based) positions by 3 from the left.

    Args:
        digits: Numeric string without check digit

    Returns:
        Calculated check digit (0-9)

    Raises:
        InvalidInputError: if digits is empty or not made of '0'-'9'
    """
    if not _is_digit_string(digits):
        raise InvalidInputError("Input must be a non-empty string of digits")

    total = 0
    for i, digit in enumerate(reversed(digits)):
        multiplier = 3 if i % 2 == 0 else 1
        total += int(digit) * multiplier

    return (10 - (total % 10)) % 10


calculate_check_digit_mod10 = compute_check_digit


def validate_check_digit(value: str) -> ValidationResult:
    """
    Validate the trailing GS1 check digit of a complete identifier.

    Args:
        value: The complete value including check digit

    Returns:
        ValidationResult with check digit status in meta
    """
    result = ValidationResult(valid=True)

    if not _is_digit_string(value):
        result.valid = False
        result.errors.append("Value must be numeric for check digit validation")
        result.meta['code'] = ErrorCode.INVALID_FORMAT
        return result

    if len(value) < 2:
        result.valid = False
        result.errors.append("Value too short for check digit validation")
        result.meta['code'] = ErrorCode.INVALID_LENGTH
        return result

    provided_check = int(value[-1])
    calculated_check = compute_check_digit(value[:-1])

    result.meta['calculated_check_digit'] = calculated_check
    result.meta['provided_check_digit'] = provided_check
    result.meta['check_digit_valid'] = (provided_check == calculated_check)

    if provided_check != calculated_check:
        result.valid = False
        result.errors.append(
            f"Check digit mismatch: expected {calculated_check}, got {provided_check}"
        )
        result.meta['code'] = ErrorCode.INVALID_CHECK_DIGIT

    return result


def validate_numeric(
    value: Any,
    min_length: int = 0,
    max_length: int = 0,
    fixed_length: Optional[int] = None
) -> ValidationResult:
    """
    Validate numeric field.

    Args:
        value: Value to validate
        min_length: Minimum length
        max_length: Maximum length
        fixed_length: If set, exact length required

    Returns:
        ValidationResult
    """
    result = ValidationResult(valid=True)

    if not isinstance(value, str):
        result.valid = False
        result.errors.append(f"Value must be a string, got {type(value).__name__}")
        result.meta['code'] = ErrorCode.INVALID_FORMAT
        return result

    if not value:
        if min_length > 0 or fixed_length:
            result.valid = False
            result.errors.append("Value is empty but minimum length required")
            result.meta['code'] = ErrorCode.INVALID_LENGTH
        return result

    if not all(c in NUMERIC for c in value):
        result.valid = False
        result.errors.append("Value contains non-numeric characters")
        result.meta['code'] = ErrorCode.INVALID_CHARACTERS
        return result

    if fixed_length is not None:
        if len(value) != fixed_length:
            result.valid = False
            result.errors.append(f"Length must be exactly {fixed_length}, got {len(value)}")
    else:
        if min_length and len(value) < min_length:
            result.valid = False
            result.errors.append(f"Length {len(value)} below minimum {min_length}")
        if max_length and len(value) > max_length:
            result.valid = False
            result.errors.append(f"Length {len(value)} exceeds maximum {max_length}")

    if not result.valid:
        result.meta['code'] = ErrorCode.INVALID_LENGTH

    return result


def validate_alphanumeric(
    value: Any,
    min_length: int = 0,
    max_length: int = 0
) -> ValidationResult:
    """
    Validate a field restricted to ASCII letters and digits.

    Args:
        value: Value to validate
        min_length: Minimum length
        max_length: Maximum length

    Returns:
        ValidationResult
    """
    result = ValidationResult(valid=True)

    if not isinstance(value, str):
        result.valid = False
        result.errors.append(f"Value must be a string, got {type(value).__name__}")
        result.meta['code'] = ErrorCode.INVALID_FORMAT
        return result

    if not value:
        if min_length > 0:
            result.valid = False
            result.errors.append("Value is empty but minimum length required")
            result.meta['code'] = ErrorCode.INVALID_LENGTH
        return result

    invalid_chars = set(value) - ALPHANUMERIC
    if invalid_chars:
        result.valid = False
        result.errors.append(f"Invalid characters: {''.join(sorted(invalid_chars))!r}")
        result.meta['code'] = ErrorCode.INVALID_CHARACTERS

    if min_length and len(value) < min_length:
        result.valid = False
        result.errors.append(f"Length {len(value)} below minimum {min_length}")
        result.meta.setdefault('code', ErrorCode.INVALID_LENGTH)
    if max_length and len(value) > max_length:
        result.valid = False
        result.errors.append(f"Length {len(value)} exceeds maximum {max_length}")
        result.meta.setdefault('code', ErrorCode.INVALID_LENGTH)

    return result


def _check_identifier(value: Any, length: int) -> ValidationResult:
    result = validate_numeric(value, fixed_length=length)

    if result.valid:
        check_result = validate_check_digit(value)
        result.valid = check_result.valid
        result.errors.extend(check_result.errors)
        result.meta.update(check_result.meta)

    return result


def check_gtin(value: Any) -> ValidationResult:
    """
    Validate GTIN (AI 01, 02).

    GTIN-14 format: N14 with check digit in position 14.
    """
    return _check_identifier(value, GTIN_LENGTH)


def check_sscc(value: Any) -> ValidationResult:
    """
    Validate SSCC (AI 00).

    SSCC-18 format: N18 with check digit in position 18.
    """
    return _check_identifier(value, SSCC_LENGTH)


def check_lot_number(value: Any) -> ValidationResult:
    """Validate a batch/lot number (AI 10): 1-20 ASCII letters or digits."""
    return validate_alphanumeric(value, min_length=1, max_length=LOT_MAX_LENGTH)


def validate_gtin(value: Any) -> bool:
    return check_gtin(value).valid


def validate_sscc(value: Any) -> bool:
    return check_sscc(value).valid


def validate_lot_number(value: Any) -> bool:
    return check_lot_number(value).valid
