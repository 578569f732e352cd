"""
Generate valid personnummer for test fixtures.
"""

from datetime import date
from typing import Optional

from identitet.checksum import luhn_check_digit
from identitet.clock import Instant
from identitet.dates import COORDINATION_OFFSET
from identitet.personnummer import parse


def generate_personnummer(
    birth_date: date,
    male: bool = True,
    serial: int = 1,
    coordination: bool = False,
    long_format: bool = True,
    now: Optional[Instant] = None,
) -> str:
    """
    Generate a valid personnummer for testing purposes.

    Args:
        birth_date: Date of birth
        male: Make the serial odd (male) or even (female)
        serial: Serial number (0-999), bumped by one to get the right parity
        coordination: Add 60 to the day (samordningsnummer)
        long_format: Return YYYYMMDDNNNC instead of YYMMDD-NNNC
        now: Reference instant used for the short form separator

    Returns:
        A valid personnummer
    """
    if not 0 <= serial <= 999:
        raise ValueError(f"Serial must be between 0 and 999, got {serial}")

    if (serial % 2 == 1) != male:
        serial = serial + 1 if serial < 999 else serial - 1

    day = birth_date.day + (COORDINATION_OFFSET if coordination else 0)
    prefix = f"{birth_date.year % 100:02d}{birth_date.month:02d}{day:02d}{serial:03d}"
    check = luhn_check_digit(prefix)

    number = f"{birth_date.year:04d}{prefix[2:]}{check}"
    # Round trip through the parser so the short form gets the right separator
    return parse(number, now=now).format(long_format)
