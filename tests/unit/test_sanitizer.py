"""
Unit tests for input sanitation.
"""

import pytest

from identitet.errors import InvalidIdentityNumber
from identitet.sanitizer import SanitizedNumber, sanitize


class TestSanitize:
    """Tests for separator stripping and digit checks."""

    def test_dash(self):
        """Test that a dash separator is stripped and recorded."""
        assert sanitize("850709-9805") == SanitizedNumber("8507099805", "-")

    def test_plus(self):
        """Test that a plus separator is stripped and recorded."""
        assert sanitize("121212+1212") == SanitizedNumber("1212121212", "+")

    def test_no_separator_defaults_to_dash(self):
        """Test the default separator."""
        assert sanitize("198507099805").separator == "-"

    def test_separator_anywhere(self):
        """Test that the separator may appear at any position."""
        assert sanitize("1985070998-05").digits == "198507099805"

    def test_integer(self):
        """Test that integers are converted to digits."""
        number = sanitize(198507099805)
        assert number.digits == "198507099805"
        assert number.has_century

    def test_short_has_no_century(self):
        """Test that 10 digits carry no century."""
        assert not sanitize("8507099805").has_century

    @pytest.mark.parametrize(
        "value,reason",
        [
            ("850709--9805", "separator"),
            ("+850709-9805", "separator"),
            ("850709 9805", "characters"),
            ("85070998O5", "characters"),
            ("８５０７０９９８０５", "characters"),
            ("85070998", "length"),
            ("19850709980", "length"),
            ("1985070998051", "length"),
            (-8507099805, "characters"),
            (False, "type"),
            (None, "type"),
            (8507099805.0, "type"),
        ],
    )
    def test_rejected(self, value, reason):
        """Test rejection reasons for malformed input."""
        with pytest.raises(InvalidIdentityNumber) as exc:
            sanitize(value)
        assert exc.value.reason == reason
