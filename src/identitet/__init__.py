"""
Identitet - Swedish personal identity numbers

Parses, validates and formats personnummer and samordningsnummer:
- 10 and 12 digit forms with '-' or '+' separator
- Century inference relative to a reference clock
- Date and mod-10 checksum validation
- Age, sex and coordination number derivations
"""

from identitet.checksum import luhn, luhn_check_digit
from identitet.errors import InvalidIdentityNumber
from identitet.generate import generate_personnummer
from identitet.personnummer import (
    ParseOptions,
    Personnummer,
    format_personnummer,
    get_age,
    is_female,
    is_male,
    is_valid,
    parse,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidIdentityNumber",
    "ParseOptions",
    "Personnummer",
    "format_personnummer",
    "generate_personnummer",
    "get_age",
    "is_female",
    "is_male",
    "is_valid",
    "luhn",
    "luhn_check_digit",
    "parse",
]
