"""
GS1 Label Toolkit

Check digits, identifier validation, SSCC generation, field formatting and
GS1-128 element string assembly for logistic labels.

Based on GS1 General Specifications.
"""

from .errors import ErrorCode, InvalidInputError, UnknownIdentifierWarning
from .validators.validators import (
    compute_check_digit,
    calculate_check_digit_mod10,
    validate_check_digit,
    validate_gtin,
    validate_sscc,
    validate_lot_number,
    check_gtin,
    check_sscc,
    check_lot_number,
    ValidationResult,
)
from .core.sscc import generate_sscc, DigitSource
from .core.element_string import (
    assemble,
    compose_element_string,
    format_application_string,
    is_variable_length_ai,
    to_human_readable,
    AIElement,
    ComposeOptions,
    ComposeResult,
    GS,
    GS_TEXT,
)
from .formatters.fields import (
    format_gs1_date,
    format_gs1_weight,
    format_gs1_quantity,
)
from .label import (
    LabelData,
    LabelSections,
    validate_label_data,
    build_label_sections,
    label_to_dict,
)

__version__ = "1.0.0"
__all__ = [
    "ErrorCode",
    "InvalidInputError",
    "UnknownIdentifierWarning",
    "compute_check_digit",
    "calculate_check_digit_mod10",
    "validate_check_digit",
    "validate_gtin",
    "validate_sscc",
    "validate_lot_number",
    "check_gtin",
    "check_sscc",
    "check_lot_number",
    "ValidationResult",
    "generate_sscc",
    "DigitSource",
    "assemble",
    "compose_element_string",
    "format_application_string",
    "is_variable_length_ai",
    "to_human_readable",
    "AIElement",
    "ComposeOptions",
    "ComposeResult",
    "GS",
    "GS_TEXT",
    "format_gs1_date",
    "format_gs1_weight",
    "format_gs1_quantity",
    "LabelData",
    "LabelSections",
    "validate_label_data",
    "build_label_sections",
    "label_to_dict",
]
