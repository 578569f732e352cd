"""
Birth date validation, including the samordningsnummer day offset.

Coordination numbers (samordningsnummer) add 60 to the day of month, so a
person born on the 7th gets day 67.
"""

import logging

from identitet.century import is_leap_year

logger = logging.getLogger(__name__)

COORDINATION_OFFSET = 60

MONTH_DAYS = {
    1: 31,
    3: 31,
    4: 30,
    5: 31,
    6: 30,
    7: 31,
    8: 31,
    9: 30,
    10: 31,
    11: 30,
    12: 31,
}


def decode_day(raw_day: int) -> tuple[int, bool]:
    """
    Remove the coordination offset from a raw day.

    Returns:
        Tuple of (calendar_day, is_coordination)
    """
    if raw_day > COORDINATION_OFFSET:
        return raw_day - COORDINATION_OFFSET, True
    return raw_day, False


def days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return MONTH_DAYS[month]


def validate_month(month: int) -> bool:
    return 1 <= month <= 12


def validate_date(
    year: int, month: int, raw_day: int, allow_coordination_number: bool = True
) -> bool:
    """
    Check that year/month/raw_day encodes a real calendar date.

    Args:
        year: Full four digit year
        month: Month as encoded
        raw_day: Day as encoded, possibly offset by 60
        allow_coordination_number: When False any raw day above 60 is rejected

    Returns:
        True if the date is valid
    """
    if year < 1:
        logger.debug("Rejected identity number: year %d", year)
        return False

    if not validate_month(month):
        logger.debug("Rejected identity number: month %d", month)
        return False

    day, is_coordination = decode_day(raw_day)
    if is_coordination and not allow_coordination_number:
        logger.debug("Rejected identity number: coordination numbers disabled")
        return False

    # Raw days 32-60 fall here as well as day 0
    if day < 1 or day > days_in_month(year, month):
        logger.debug("Rejected identity number: day out of range")
        return False

    return True
