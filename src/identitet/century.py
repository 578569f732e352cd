"""
Century inference for Swedish personal identity numbers.

The short form carries only a two digit year. The full year is the latest
year not after the base year that ends in those two digits. The base year is
the reference year, or the reference year minus 100 when the number was
written with a '+' separator (the holder has turned 100).
"""

from dataclasses import dataclass

from identitet.sanitizer import SanitizedNumber


@dataclass(frozen=True)
class ResolvedYear:
    century: str  # "19"
    full_year: str  # "1985"
    year: str  # "85"


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def infer_full_year(year: int, reference_year: int, centenarian: bool = False) -> int:
    """
    Extend a two digit year to four digits.

    Args:
        year: Year within the century (0-99)
        reference_year: Current year according to the reference clock
        centenarian: True when the '+' separator was given

    Returns:
        Largest year <= base year whose last two digits equal ``year``
    """
    base_year = reference_year - 100 if centenarian else reference_year
    return base_year - ((base_year - year) % 100)


def resolve_century(number: SanitizedNumber, reference_year: int) -> ResolvedYear:
    """Resolve century, full year and two digit year of a sanitized number."""
    digits = number.digits
    if number.has_century:
        return ResolvedYear(century=digits[:2], full_year=digits[:4], year=digits[2:4])

    full_year = infer_full_year(
        int(digits[:2]), reference_year, centenarian=number.separator == "+"
    )
    full = f"{full_year:04d}"
    return ResolvedYear(century=full[:2], full_year=full, year=digits[:2])
