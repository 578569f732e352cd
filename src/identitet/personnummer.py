"""
Swedish personnummer (personal identity number) parsing and formatting.

Format: YYMMDD-NNNC or YYYYMMDDNNNC
- YYMMDD / YYYYMMDD: birth date
- NNN: serial number, the last digit is odd for men and even for women
- C: mod-10 check digit

The short form separator is '-' until the holder turns 100, when it
becomes '+'. Coordination numbers (samordningsnummer) add 60 to the day.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

from identitet.century import is_leap_year, resolve_century
from identitet.checksum import luhn
from identitet.clock import Instant, current_time
from identitet.dates import decode_day, validate_date
from identitet.errors import InvalidIdentityNumber
from identitet.sanitizer import DIGITS, SEPARATORS, NumericInput, sanitize

logger = logging.getLogger(__name__)

# 365.25 days in milliseconds
MILLISECONDS_PER_YEAR = 3.15576e10

CENTENARIAN_AGE = 100


@dataclass(frozen=True)
class ParseOptions:
    """Options accepted by :func:`parse` and friends."""

    allow_coordination_number: bool = True

    @classmethod
    def from_settings(cls, settings) -> "ParseOptions":
        return cls(allow_coordination_number=settings.allow_coordination_number)


DEFAULT_OPTIONS = ParseOptions()


def _age_in_years(birth_date: date, reference: datetime) -> int:
    born = datetime(birth_date.year, birth_date.month, birth_date.day, tzinfo=timezone.utc)
    milliseconds = (reference - born) // timedelta(milliseconds=1)
    return math.floor(milliseconds / MILLISECONDS_PER_YEAR)


@dataclass(frozen=True)
class Personnummer:
    """
    A validated personnummer or samordningsnummer.

    Instances are produced by :func:`parse`. Constructing one directly runs
    the same date and checksum checks and raises InvalidIdentityNumber.
    """

    century: str
    full_year: str
    year: str
    month: str
    day: str  # as encoded, 61-91 for coordination numbers
    serial: str
    check_digit: str
    separator: str
    is_coordination: bool
    is_leap_year: bool  # two digit year rule

    def __post_init__(self):
        fields = [
            (self.century, 2),
            (self.full_year, 4),
            (self.year, 2),
            (self.month, 2),
            (self.day, 2),
            (self.serial, 3),
            (self.check_digit, 1),
        ]
        for value, width in fields:
            if not isinstance(value, str) or len(value) != width:
                raise InvalidIdentityNumber("length")
            if not all(c in DIGITS for c in value):
                raise InvalidIdentityNumber("characters")

        if self.full_year != self.century + self.year:
            raise InvalidIdentityNumber("date")
        if self.separator not in SEPARATORS:
            raise InvalidIdentityNumber("separator")

        month = int(self.month)
        if not validate_date(int(self.full_year), month, int(self.day)):
            raise InvalidIdentityNumber("month" if not 1 <= month <= 12 else "date")
        if self.is_coordination != decode_day(int(self.day))[1]:
            raise InvalidIdentityNumber("date")
        if self.is_leap_year != is_leap_year(int(self.year)):
            raise InvalidIdentityNumber("date")

        if not luhn(f"{self.year}{self.month}{self.day}{self.serial}{self.check_digit}"):
            raise InvalidIdentityNumber("checksum")

    @classmethod
    def parse(
        cls,
        value: NumericInput,
        options: Optional[ParseOptions] = None,
        now: Optional[Instant] = None,
    ) -> "Personnummer":
        return parse(value, options=options, now=now)

    @property
    def calendar_day(self) -> int:
        return decode_day(int(self.day))[0]

    @property
    def birth_date(self) -> date:
        return date(int(self.full_year), int(self.month), self.calendar_day)

    def get_date(self) -> date:
        return self.birth_date

    def get_age(self, now: Optional[Instant] = None) -> int:
        """Age in whole 365.25 day years at ``now`` (default: system clock)."""
        return _age_in_years(self.birth_date, current_time(now))

    def is_coordination_number(self) -> bool:
        return self.is_coordination

    def is_male(self) -> bool:
        return int(self.serial[2]) % 2 == 1

    def is_female(self) -> bool:
        return not self.is_male()

    @property
    def long_format(self) -> str:
        return f"{self.century}{self.year}{self.month}{self.day}{self.serial}{self.check_digit}"

    @property
    def short_format(self) -> str:
        return f"{self.year}{self.month}{self.day}{self.separator}{self.serial}{self.check_digit}"

    def format(self, long_format: bool = False) -> str:
        """
        Format as one of the two official forms.

        Args:
            long_format: True for YYYYMMDDNNNC, False for YYMMDD-NNNC

        Returns:
            The formatted number
        """
        return self.long_format if long_format else self.short_format

    def __str__(self) -> str:
        return self.short_format


def parse(
    value: NumericInput,
    options: Optional[ParseOptions] = None,
    now: Optional[Instant] = None,
) -> Personnummer:
    """
    Parse and validate a Swedish personnummer.

    Accepts formats:
    - YYMMDD-NNNC, YYMMDD+NNNC, YYMMDDNNNC
    - YYYYMMDD-NNNC, YYYYMMDDNNNC
    - int with 10 or 12 digits

    Args:
        value: The number to parse
        options: Parse options (coordination numbers allowed by default)
        now: Reference instant for century inference and the separator

    Returns:
        Personnummer

    Raises:
        InvalidIdentityNumber: if the number is malformed, has an impossible
            date or fails the checksum
    """
    options = options or DEFAULT_OPTIONS
    reference = current_time(now)

    number = sanitize(value)
    resolved = resolve_century(number, reference.year)

    digits = number.digits[2:] if number.has_century else number.digits
    month = int(digits[2:4])
    raw_day = int(digits[4:6])

    if not validate_date(
        int(resolved.full_year),
        month,
        raw_day,
        allow_coordination_number=options.allow_coordination_number,
    ):
        raise InvalidIdentityNumber("month" if not 1 <= month <= 12 else "date")

    if not luhn(digits):
        logger.debug("Rejected identity number: checksum")
        raise InvalidIdentityNumber("checksum")

    calendar_day, is_coordination = decode_day(raw_day)

    separator = number.separator
    if number.has_century:
        born = date(int(resolved.full_year), month, calendar_day)
        separator = "+" if _age_in_years(born, reference) >= CENTENARIAN_AGE else "-"

    return Personnummer(
        century=resolved.century,
        full_year=resolved.full_year,
        year=resolved.year,
        month=digits[2:4],
        day=digits[4:6],
        serial=digits[6:9],
        check_digit=digits[9],
        separator=separator,
        is_coordination=is_coordination,
        is_leap_year=is_leap_year(int(resolved.year)),
    )


def is_valid(
    value: NumericInput,
    options: Optional[ParseOptions] = None,
    now: Optional[Instant] = None,
) -> bool:
    """Return True if ``value`` parses as a personnummer."""
    try:
        parse(value, options=options, now=now)
    except InvalidIdentityNumber:
        return False
    return True


def _as_personnummer(
    value: Union[Personnummer, NumericInput],
    options: Optional[ParseOptions],
    now: Optional[Instant],
) -> Personnummer:
    if isinstance(value, Personnummer):
        return value
    return parse(value, options=options, now=now)


def format_personnummer(
    value: Union[Personnummer, NumericInput],
    long_format: bool = False,
    options: Optional[ParseOptions] = None,
    now: Optional[Instant] = None,
) -> str:
    """
    Format a personnummer in the short (YYMMDD-NNNC) or long (YYYYMMDDNNNC) form.

    Raises:
        InvalidIdentityNumber: if ``value`` is raw input that does not parse
    """
    return _as_personnummer(value, options, now).format(long_format)


def get_age(
    value: Union[Personnummer, NumericInput],
    now: Optional[Instant] = None,
    options: Optional[ParseOptions] = None,
) -> int:
    reference = current_time(now)
    return _as_personnummer(value, options, reference).get_age(reference)


def is_male(
    value: Union[Personnummer, NumericInput],
    options: Optional[ParseOptions] = None,
    now: Optional[Instant] = None,
) -> bool:
    return _as_personnummer(value, options, now).is_male()


def is_female(
    value: Union[Personnummer, NumericInput],
    options: Optional[ParseOptions] = None,
    now: Optional[Instant] = None,
) -> bool:
    return _as_personnummer(value, options, now).is_female()
