"""
GS1-128 Logistic Label Data

Validates label form data and assembles the element strings for the three
barcode sections of a logistic label:

1. Content: GTIN (01), batch/lot (10), production date (11)
2. Quantity: count (37), net weight in pounds (3201)
3. SSCC (00), always at the bottom of the label

The strings are handed to a barcode renderer and printed as human-readable
text; drawing the label is left to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from .core.ai_dictionary import ai_title
from .core.element_string import ComposeOptions, compose_element_string, to_human_readable
from .core.sscc import DigitSource, generate_sscc
from .errors import InvalidInputError
from .formatters.fields import format_gs1_weight, parse_date, parse_number
from .validators.validators import NUMERIC, ValidationResult, check_gtin, check_lot_number, check_sscc

logger = logging.getLogger(__name__)

# Section name -> (named field keys, LabelData attributes), in print order
DEFAULT_LABEL_LAYOUT: Dict[str, Tuple[Tuple[str, str], ...]] = {
    "content": (("GTIN", "gtin"), ("BATCH_LOT", "lot_number"), ("PROD_DATE", "production_date")),
    "quantity": (("QTY", "quantity"), ("WEIGHT_LB", "weight_pounds")),
    "sscc": (("SSCC", "sscc"),),
}

MAX_QUANTITY = 999999


@dataclass
class LabelData:
    """
    Field values collected for one logistic label.

    Attributes:
        gtin: GTIN-14 of the contained trade items
        lot_number: Batch/lot number
        production_date: date, datetime or date string
        quantity: Count of trade items
        weight_pounds: Net weight in pounds
        sscc: SSCC of the logistic unit; generated if None
    """
    gtin: Any = None
    lot_number: Any = None
    production_date: Any = None
    quantity: Any = None
    weight_pounds: Any = None
    sscc: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'LabelData':
        """Build from form-style keys; unknown keys are ignored."""
        return cls(
            gtin=data.get("gtin"),
            lot_number=data.get("lot_number"),
            production_date=data.get("production_date"),
            quantity=data.get("quantity"),
            weight_pounds=data.get("weight_pounds"),
            sscc=data.get("sscc") or None,
        )


@dataclass
class LabelSections:
    """Element strings for the three barcode sections of a label."""
    content: str
    quantity: str
    sscc: str
    sscc_value: str


def _check_quantity(value: Any) -> Optional[str]:
    if isinstance(value, str):
        value = value.strip()
        if not value or not all(c in NUMERIC for c in value):
            return "Quantity must be a whole number"
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        return "Quantity must be a whole number"
    if value < 0:
        return "Quantity must not be negative"
    if value > MAX_QUANTITY:
        return f"Quantity must be at most {MAX_QUANTITY}"
    return None


def _check_weight(value: Any) -> Optional[str]:
    if parse_number(value) is None:
        return "Weight must be a number"
    try:
        format_gs1_weight(value, 1)
    except InvalidInputError as e:
        return f"Weight out of range: {e}"
    return None


def validate_label_data(label: LabelData) -> ValidationResult:
    """
    Validate all label fields.

    Returns:
        ValidationResult; meta['invalid_fields'] lists failing field names
    """
    result = ValidationResult(valid=True)
    invalid = []

    def fail(field_name: str, message: str) -> None:
        invalid.append(field_name)
        result.errors.append(f"{field_name}: {message}")

    gtin_result = check_gtin(label.gtin)
    if not gtin_result.valid:
        fail("gtin", "; ".join(gtin_result.errors))

    lot_result = check_lot_number(label.lot_number)
    if not lot_result.valid:
        fail("lot_number", "; ".join(lot_result.errors) or "Lot number is required")

    if parse_date(label.production_date) is None:
        fail("production_date", "Production date is missing or not a date")

    quantity_error = _check_quantity(label.quantity)
    if quantity_error:
        fail("quantity", quantity_error)

    weight_error = _check_weight(label.weight_pounds)
    if weight_error:
        fail("weight_pounds", weight_error)

    if label.sscc is not None:
        sscc_result = check_sscc(label.sscc)
        if not sscc_result.valid:
            fail("sscc", "; ".join(sscc_result.errors))

    result.valid = not invalid
    result.meta['invalid_fields'] = invalid
    return result


def build_label_sections(
    label: LabelData,
    *,
    options: Optional[ComposeOptions] = None,
    rng: Optional[DigitSource] = None
) -> LabelSections:
    """
    Validate a label and assemble its section element strings.

    Args:
        label: Label field values
        options: Element string assembly options
        rng: Digit source for SSCC generation when label.sscc is None

    Returns:
        LabelSections

    Raises:
        InvalidInputError: if any field fails validation
    """
    validation = validate_label_data(label)
    if not validation.valid:
        raise InvalidInputError("Invalid label data: " + "; ".join(validation.errors))

    sscc = label.sscc or generate_sscc(rng=rng)
    values = dict(vars(label), sscc=sscc)

    strings = {}
    for section, fields in DEFAULT_LABEL_LAYOUT.items():
        pairs = [(key, values[attr]) for key, attr in fields]
        strings[section] = compose_element_string(pairs, options).text

    logger.info("Built label sections for GTIN %s, SSCC %s", label.gtin, sscc)
    return LabelSections(
        content=strings["content"],
        quantity=strings["quantity"],
        sscc=strings["sscc"],
        sscc_value=sscc,
    )


def label_to_dict(
    sections: LabelSections,
    human_readable: bool = False,
    separator: Optional[str] = None
) -> Dict[str, Any]:
    """
    Convert label sections to a JSON-ready dict with readable names.

    Args:
        sections: Result of build_label_sections()
        human_readable: Also include the printed text for each section
        separator: Separator used when the sections were built

    Returns:
        Dict keyed by section name, plus the SSCC under its AI title
    """
    sep = separator if separator is not None else ComposeOptions().separator
    output: Dict[str, Any] = {ai_title("00"): sections.sscc_value}

    for name in DEFAULT_LABEL_LAYOUT:
        text = getattr(sections, name)
        if human_readable:
            output[f"{name}_barcode"] = {
                "data": text,
                "text": to_human_readable(text, sep),
            }
        else:
            output[f"{name}_barcode"] = text

    return output
