"""
GS1-128 Element String Assembly

Builds the "(AI)value" element string that a barcode renderer encodes and
a label prints as human-readable text.

Key GS1 Rules:
- Variable-length AIs SHALL be delimited by FNC1/GS unless they are the last element
- FNC1 is transmitted as <GS> (ASCII 29, 0x1D) by scanners
- Fixed-length AIs do not require separators
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, NamedTuple, Optional, Tuple, Union

from ..errors import ErrorCode, InvalidInputError, UnknownIdentifierWarning
from ..formatters.fields import format_gs1_date, format_gs1_quantity, format_gs1_weight
from ..validators.validators import NUMERIC
from .ai_dictionary import NAMED_FIELDS, VARIABLE_LENGTH_AIS, NamedField

logger = logging.getLogger(__name__)

GS = '\x1d'
GS_TEXT = '<GS>'


class AIElement(NamedTuple):
    """An Application Identifier and its data."""
    ai: str
    value: Any


@dataclass
class ComposeOptions:
    """
    Configuration options for element string assembly.

    Attributes:
        separator: Token written after variable-length elements. '<GS>' for
            display; GS (ASCII 29) for data passed to an encoder.
        variable_length_ais: AIs that need a separator when followed by more data
        log_unknown_keys: Log skipped keys at WARNING level
    """
    separator: str = GS_TEXT
    variable_length_ais: frozenset = VARIABLE_LENGTH_AIS
    log_unknown_keys: bool = True


@dataclass
class ComposeWarning:
    """A non-fatal problem found while assembling."""
    code: str
    message: str
    key: Optional[str] = None


@dataclass
class ComposeResult:
    """
    Result of assembling an element string.

    Attributes:
        text: The element string
        elements: Elements that were written, with resolved AIs and values
        warnings: Skipped keys and other non-fatal problems
    """
    text: str
    elements: List[AIElement] = field(default_factory=list)
    warnings: List[ComposeWarning] = field(default_factory=list)


ElementsInput = Union[Mapping[str, Any], Iterable[Union[Tuple[str, Any], Mapping[str, Any]]]]


def is_variable_length_ai(ai: str) -> bool:
    """Check if an Application Identifier needs a separator before further data."""
    return ai in VARIABLE_LENGTH_AIS


def format_application_string(ai: str, value: Any) -> str:
    """Render one element as (ai)value."""
    return f"({ai}){value}"


def _format_named(named: NamedField, value: Any) -> str:
    if named.kind == "date":
        return format_gs1_date(value)
    if named.kind == "quantity":
        return format_gs1_quantity(value)
    if named.kind == "weight":
        return format_gs1_weight(value, named.decimal_positions)
    return str(value)


def _resolve(key: Any, value: Any) -> Optional[AIElement]:
    """
    Map an input key to (AI, formatted value).

    Returns None for keys that are neither named fields nor numeric AIs.
    """
    name = str(key).strip().upper()

    named = NAMED_FIELDS.get(name)
    if named is not None:
        return AIElement(named.ai, _format_named(named, value))

    if name and all(c in NUMERIC for c in name):
        return AIElement(name, str(value))

    return None


def _iter_pairs(elements: ElementsInput) -> Iterable[Tuple[Any, Any]]:
    if isinstance(elements, Mapping):
        yield from elements.items()
        return
    for item in elements:
        if isinstance(item, Mapping):
            # {"ai": "01", "value": "..."} records, as posted by the label form
            yield item.get("ai"), item.get("value")
        elif isinstance(item, (tuple, list)) and len(item) == 2:
            yield item
        else:
            raise InvalidInputError(
                f"Expected an (ai, value) pair or {{'ai', 'value'}} record, got {item!r}"
            )


def compose_element_string(
    elements: ElementsInput,
    options: Optional[ComposeOptions] = None
) -> ComposeResult:
    """
    Assemble (AI, value) pairs into a GS1-128 element string.

    Keys may be numeric AIs ("01", "3103") or named fields ("GTIN",
    "BATCH_LOT", "EXP_DATE", ...), which are formatted for their AI.
    Elements with a None value are skipped. Unknown non-numeric keys are
    skipped and reported in result.warnings.

    Args:
        elements: Mapping or ordered iterable of (key, value) pairs
        options: Assembly options

    Returns:
        ComposeResult with the element string

    Raises:
        InvalidInputError: if an element is not a pair or record, or a named
            weight/quantity value does not fit its field
    """
    opts = options or ComposeOptions()
    result = ComposeResult(text="")

    for key, value in _iter_pairs(elements):
        if value is None:
            continue

        element = _resolve(key, value)
        if element is None:
            message = f"Unknown GS1 AI: {key}"
            result.warnings.append(ComposeWarning(ErrorCode.UNKNOWN_AI.value, message, str(key)))
            if opts.log_unknown_keys:
                logger.warning(message)
            continue

        result.elements.append(element)

    parts: List[str] = []
    last = len(result.elements) - 1
    for i, element in enumerate(result.elements):
        parts.append(format_application_string(element.ai, element.value))
        if i < last and element.ai in opts.variable_length_ais:
            parts.append(opts.separator)

    result.text = "".join(parts)
    return result


def assemble(
    elements: ElementsInput,
    options: Optional[ComposeOptions] = None
) -> str:
    """
    Assemble an element string, issuing UnknownIdentifierWarning for skipped keys.

    Example:
        >>> assemble([("01", "00012345678905"), ("10", "LOT42"), ("11", "240305")])
        '(01)00012345678905<GS>(10)LOT42<GS>(11)240305'
    """
    result = compose_element_string(elements, options)
    for warning in result.warnings:
        warnings.warn(warning.message, UnknownIdentifierWarning, stacklevel=2)
    return result.text


def to_human_readable(text: str, separator: str = GS_TEXT) -> str:
    """Replace separators with spaces for the text printed under a barcode."""
    return " ".join(part for part in text.split(separator) if part)
