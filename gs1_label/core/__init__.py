"""
Core modules for GS1 label toolkit.
"""

from .ai_dictionary import (
    AIEntry,
    AI_ENTRIES,
    NAMED_FIELDS,
    VARIABLE_LENGTH_AIS,
    ai_title,
    get_ai_entry,
)
from .element_string import (
    assemble,
    compose_element_string,
    format_application_string,
    is_variable_length_ai,
    to_human_readable,
    AIElement,
    ComposeOptions,
    ComposeResult,
    ComposeWarning,
    GS,
    GS_TEXT,
)
from .sscc import generate_sscc, DigitSource

__all__ = [
    "AIEntry",
    "AI_ENTRIES",
    "NAMED_FIELDS",
    "VARIABLE_LENGTH_AIS",
    "ai_title",
    "get_ai_entry",
    "assemble",
    "compose_element_string",
    "format_application_string",
    "is_variable_length_ai",
    "to_human_readable",
    "AIElement",
    "ComposeOptions",
    "ComposeResult",
    "ComposeWarning",
    "GS",
    "GS_TEXT",
    "generate_sscc",
    "DigitSource",
]
