"""
Validation modules for GS1 label toolkit.
"""

from .validators import (
    compute_check_digit,
    calculate_check_digit_mod10,
    validate_check_digit,
    validate_numeric,
    validate_alphanumeric,
    validate_gtin,
    validate_sscc,
    validate_lot_number,
    check_gtin,
    check_sscc,
    check_lot_number,
    ValidationResult,
    ALPHANUMERIC,
    NUMERIC,
)

__all__ = [
    "compute_check_digit",
    "calculate_check_digit_mod10",
    "validate_check_digit",
    "validate_numeric",
    "validate_alphanumeric",
    "validate_gtin",
    "validate_sscc",
    "validate_lot_number",
    "check_gtin",
    "check_sscc",
    "check_lot_number",
    "ValidationResult",
    "ALPHANUMERIC",
    "NUMERIC",
]
