"""
Input sanitation for Swedish personal identity numbers.

Accepted shapes:
- YYMMDD-NNNC, YYMMDD+NNNC, YYMMDDNNNC (10 digits)
- YYYYMMDD-NNNC, YYYYMMDDNNNC (12 digits)
- The same digits given as a non-negative int
"""

import logging
from dataclasses import dataclass
from typing import Union

from identitet.errors import InvalidIdentityNumber

logger = logging.getLogger(__name__)

NumericInput = Union[str, int]

LENGTH_WITHOUT_CENTURY = 10
LENGTH_WITH_CENTURY = 12

SEPARATORS = ("-", "+")
DEFAULT_SEPARATOR = "-"
DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class SanitizedNumber:
    """Digit sequence and the separator that was stripped from it."""

    digits: str  # 10 or 12 ASCII digits
    separator: str = DEFAULT_SEPARATOR

    @property
    def has_century(self) -> bool:
        return len(self.digits) == LENGTH_WITH_CENTURY


def _to_text(value: NumericInput) -> str:
    # bool is an int subclass but never a meaningful identity number
    if isinstance(value, bool):
        raise InvalidIdentityNumber("type")
    if isinstance(value, int):
        if value < 0:
            raise InvalidIdentityNumber("characters")
        return str(value)
    if isinstance(value, str):
        return value
    raise InvalidIdentityNumber("type")


def sanitize(value: NumericInput) -> SanitizedNumber:
    """
    Strip the separator and check the digit stream.

    Args:
        value: Raw input, a string or an int

    Returns:
        SanitizedNumber with 10 or 12 digits

    Raises:
        InvalidIdentityNumber: wrong type, more than one separator,
            non-digit characters or a length other than 10 or 12
    """
    text = _to_text(value)

    found = [c for c in text if c in SEPARATORS]
    if len(found) > 1:
        logger.debug("Rejected identity number: %d separators", len(found))
        raise InvalidIdentityNumber("separator")
    separator = found[0] if found else DEFAULT_SEPARATOR

    digits = "".join(c for c in text if c not in SEPARATORS)
    if not all(c in DIGITS for c in digits):
        logger.debug("Rejected identity number: non-digit characters")
        raise InvalidIdentityNumber("characters")

    if len(digits) not in (LENGTH_WITHOUT_CENTURY, LENGTH_WITH_CENTURY):
        logger.debug("Rejected identity number: length %d", len(digits))
        raise InvalidIdentityNumber("length")

    return SanitizedNumber(digits=digits, separator=separator)
