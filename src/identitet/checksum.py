"""
Mod-10 checksum for Swedish personal identity numbers.

The checksum covers the ten digits YYMMDDNNNC as written, coordination
offset included and century excluded:
1. Weights alternate 2, 1, 2, ... so that the check digit gets weight 1
2. Doubled digits above 9 have 9 subtracted
3. The number is valid when the sum is divisible by 10
"""

from identitet.errors import InvalidIdentityNumber

# Doubled digit with 9 subtracted when above 9
DOUBLED = (0, 2, 4, 6, 8, 1, 3, 5, 7, 9)


def _digit_values(digits: str) -> list[int]:
    if not digits or not all("0" <= c <= "9" for c in digits):
        raise InvalidIdentityNumber("characters")
    return [ord(c) - ord("0") for c in digits]


def _weighted_sum(values: list[int], odd: int) -> int:
    total = 0
    for i, d in enumerate(values):
        total += DOUBLED[d] if i & 1 == odd else d
    return total


def luhn(digits: str) -> bool:
    """
    Test a digit string against the mod-10 checksum.

    Raises:
        InvalidIdentityNumber: if the string is empty or holds non-digits
    """
    values = _digit_values(digits)
    return _weighted_sum(values, len(values) & 1) % 10 == 0


def luhn_check_digit(digits: str) -> int:
    """
    Calculate the check digit that completes ``digits``.

    For a personnummer pass the nine digits YYMMDDNNN.
    """
    values = _digit_values(digits)
    # The completed string is one digit longer, which flips the parity
    total = _weighted_sum(values, (len(values) + 1) & 1)
    return (10 - total % 10) % 10
