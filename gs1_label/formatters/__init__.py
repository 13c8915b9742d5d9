"""
Field formatters for GS1 label data.
"""

from .fields import (
    format_gs1_date,
    format_gs1_weight,
    format_gs1_quantity,
    parse_date,
    parse_number,
)

__all__ = [
    "format_gs1_date",
    "format_gs1_weight",
    "format_gs1_quantity",
    "parse_date",
    "parse_number",
]
