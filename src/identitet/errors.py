"""
Errors raised while parsing Swedish personal identity numbers.
"""


class InvalidIdentityNumber(ValueError):
    """Raised when a value is not a valid personnummer or samordningsnummer.

    Every failure cause surfaces as this one error. ``reason`` names the
    check that failed ("type", "characters", "separator", "length",
    "month", "date" or "checksum").
    """

    message = "Invalid Swedish personal identity number"

    def __init__(self, reason: str = "invalid"):
        self.reason = reason
        super().__init__(self.message)
