"""
Application Identifier table for GS1 label assembly.

Holds the AIs a logistic label works with, the set of AIs that are followed
by a group separator when more data comes after them, and the named field
keys accepted by the element string assembler.

Reference: https://ref.gs1.org/ai/
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional


@dataclass(frozen=True)
class AIEntry:
    """
    Represents a single GS1 Application Identifier entry.

    Attributes:
        ai: The Application Identifier code (2-4 digits)
        title: Human-readable title/name
        fixed_length: Fixed data length if predefined, None if variable
        max_length: Maximum data length
        data_type: 'N' for numeric, 'X' for alphanumeric
        decimal_positions: Implied decimal positions (weight/measure AIs)
        date_format: 'YYMMDD' for date AIs
    """
    ai: str
    title: str
    fixed_length: Optional[int] = None
    max_length: int = 0
    data_type: str = "X"
    decimal_positions: Optional[int] = None
    date_format: Optional[str] = None


def _entry(ai: str, title: str, spec: str, **kwargs) -> AIEntry:
    """
    Build an AIEntry from a GS1 syntax spec such as "N18" or "X..20".
    """
    data_type = spec[0]
    if ".." in spec:
        return AIEntry(ai, title, None, int(spec.split("..")[1]), data_type, **kwargs)
    length = int(spec[1:])
    return AIEntry(ai, title, length, length, data_type, **kwargs)


AI_ENTRIES: Dict[str, AIEntry] = {
    e.ai: e for e in [
        _entry("00", "SSCC", "N18"),
        _entry("01", "GTIN", "N14"),
        _entry("02", "Content GTIN", "N14"),
        _entry("10", "Batch/Lot Number", "X..20"),
        _entry("11", "Production Date", "N6", date_format="YYMMDD"),
        _entry("12", "Due Date", "N6", date_format="YYMMDD"),
        _entry("13", "Packaging Date", "N6", date_format="YYMMDD"),
        _entry("15", "Best Before Date", "N6", date_format="YYMMDD"),
        _entry("17", "Expiry Date", "N6", date_format="YYMMDD"),
        _entry("20", "Variant", "N2"),
        _entry("21", "Serial Number", "X..20"),
        _entry("22", "Consumer Product Variant", "X..20"),
        _entry("30", "Variable Count", "N..8"),
        _entry("37", "Count of Trade Items", "N..8"),
        _entry("3103", "Net Weight (kg)", "N6", decimal_positions=3),
        _entry("3201", "Net Weight (lb)", "N6", decimal_positions=1),
    ]
}
for _n in range(90, 100):
    AI_ENTRIES[str(_n)] = _entry(str(_n), f"Internal Company Code {_n - 89}", "X..90")


# AIs followed by a separator unless they are the last element of the string.
# This is the label service's list; it includes some fixed-length AIs (00, 01,
# 11, ...) so the printed string always marks their boundary.
VARIABLE_LENGTH_AIS: FrozenSet[str] = frozenset({
    '00', '01', '02', '10', '11', '12', '13', '15', '17', '20',
    '21', '22', '30', '37', '90', '91', '92', '93', '94', '95',
    '96', '97', '98', '99',
})


@dataclass(frozen=True)
class NamedField:
    """
    A field key accepted in place of a numeric AI.

    Attributes:
        key: Upper-case field key (e.g. 'BATCH_LOT')
        ai: AI the field is encoded under
        kind: How the value is formatted: 'text', 'date', 'quantity' or 'weight'
        decimal_positions: Decimal places for 'weight' fields
    """
    key: str
    ai: str
    kind: str = "text"
    decimal_positions: int = 0


NAMED_FIELDS: Dict[str, NamedField] = {
    f.key: f for f in [
        NamedField("SSCC", "00"),
        NamedField("GTIN", "01"),
        NamedField("CONTENT_GTIN", "02"),
        NamedField("BATCH_LOT", "10"),
        NamedField("PROD_DATE", "11", "date"),
        NamedField("EXP_DATE", "17", "date"),
        NamedField("QTY", "37", "quantity"),
        NamedField("WEIGHT_KG", "3103", "weight", 3),
        NamedField("WEIGHT_LB", "3201", "weight", 1),
    ]
}


def get_ai_entry(ai: str) -> Optional[AIEntry]:
    """Get AI entry by exact AI code."""
    return AI_ENTRIES.get(ai)


def ai_title(ai: str) -> str:
    entry = get_ai_entry(ai)
    return entry.title if entry else f"AI({ai})"
