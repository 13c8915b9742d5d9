"""
SSCC (Serial Shipping Container Code) generation.

An SSCC is 18 digits:

    [extension digit][GS1 company prefix][serial reference][check digit]

The extension digit, company prefix and serial reference together take
17 digits; the check digit is the GS1 Mod10 check digit of those 17.
"""

from __future__ import annotations

import logging
import secrets
from typing import Optional, Protocol, Union

from ..errors import InvalidInputError
from ..validators.validators import compute_check_digit, NUMERIC

logger = logging.getLogger(__name__)

SSCC_BODY_LENGTH = 17
RANDOM_PREFIX_RANGE = (1000000, 9999999)


class DigitSource(Protocol):
    """
    Source of uniformly distributed integers.

    random.Random, random.SystemRandom and secrets.SystemRandom all satisfy
    this protocol.
    """

    def randint(self, a: int, b: int) -> int:
        ...


# Reads from the OS entropy pool and holds no state, so it is safe to share
# between threads.
_default_source: DigitSource = secrets.SystemRandom()


def _normalize_extension(extension_digit: Union[int, str]) -> str:
    if isinstance(extension_digit, bool):
        raise InvalidInputError("Extension digit must be a single digit 0-9")
    if isinstance(extension_digit, int) and 0 <= extension_digit <= 9:
        return str(extension_digit)
    if isinstance(extension_digit, str) and len(extension_digit) == 1 and extension_digit in NUMERIC:
        return extension_digit
    raise InvalidInputError(
        f"Extension digit must be a single digit 0-9, got {extension_digit!r}"
    )


def generate_sscc(
    company_prefix: Optional[str] = None,
    extension_digit: Optional[Union[int, str]] = None,
    *,
    rng: Optional[DigitSource] = None
) -> str:
    """
    Generate a check-digit-valid 18-digit SSCC.

    Args:
        company_prefix: GS1 company prefix digits. A random 7-digit prefix
            is used when omitted.
        extension_digit: Extension digit 0-9. Random when omitted.
        rng: Source of random integers; defaults to secrets.SystemRandom.

    Returns:
        The SSCC as an 18-character digit string

    Raises:
        InvalidInputError: if the prefix is not numeric or leaves no room
            for the extension digit, or the extension digit is not 0-9
    """
    source = rng if rng is not None else _default_source

    if company_prefix is None or company_prefix == "":
        prefix = str(source.randint(*RANDOM_PREFIX_RANGE))
    elif not isinstance(company_prefix, str) or not all(c in NUMERIC for c in company_prefix):
        raise InvalidInputError(
            f"Company prefix must be a string of digits, got {company_prefix!r}"
        )
    else:
        prefix = company_prefix

    if extension_digit is None:
        extension = str(source.randint(0, 9))
    else:
        extension = _normalize_extension(extension_digit)

    serial_length = SSCC_BODY_LENGTH - len(prefix) - 1
    if serial_length < 0:
        raise InvalidInputError(
            f"Company prefix too long for SSCC: {len(prefix)} digits, "
            f"at most {SSCC_BODY_LENGTH - 1} allowed"
        )

    serial_reference = "".join(str(source.randint(0, 9)) for _ in range(serial_length))

    body = extension + prefix + serial_reference
    sscc = body + str(compute_check_digit(body))

    logger.debug("Generated SSCC %s (prefix=%s, extension=%s)", sscc, prefix, extension)
    return sscc
