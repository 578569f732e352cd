"""
Unit tests for birth date validation.
"""

import pytest

from identitet.dates import days_in_month, decode_day, validate_date


class TestDecodeDay:
    """Tests for the samordningsnummer offset."""

    def test_regular_day(self):
        """Test that regular days are unchanged."""
        assert decode_day(9) == (9, False)

    def test_coordination_day(self):
        """Test that days above 60 lose the offset."""
        assert decode_day(67) == (7, True)
        assert decode_day(61) == (1, True)

    def test_day_60_is_not_coordination(self):
        """Test that day 60 is not a coordination day."""
        assert decode_day(60) == (60, False)


class TestDaysInMonth:
    """Tests for month lengths."""

    def test_february(self):
        """Test February in leap and common years."""
        assert days_in_month(2000, 2) == 29
        assert days_in_month(1900, 2) == 28

    def test_thirty_day_months(self):
        """Test April, June, September and November."""
        assert [days_in_month(2019, m) for m in (4, 6, 9, 11)] == [30, 30, 30, 30]


class TestValidateDate:
    """Tests for month and day bounds."""

    @pytest.mark.parametrize(
        "year,month,day,expected",
        [
            (1985, 7, 9, True),
            (1985, 7, 31, True),
            (1985, 4, 30, True),
            (1985, 4, 31, False),
            (1985, 13, 1, False),
            (1985, 0, 1, False),
            (1985, 7, 0, False),
            (1985, 7, 32, False),
            (1985, 7, 60, False),
            (1985, 7, 61, True),
            (1985, 7, 91, True),
            (1985, 7, 92, False),
            (1985, 4, 91, False),
            (1985, 2, 29, False),
            (2000, 2, 29, True),
            (2000, 2, 89, True),
            (1900, 2, 29, False),
            (0, 1, 1, False),
        ],
    )
    def test_dates(self, year, month, day, expected):
        """Test raw year, month and day combinations."""
        assert validate_date(year, month, day) is expected

    def test_coordination_disabled(self):
        """Test that days above 60 are rejected when disabled."""
        assert not validate_date(1985, 7, 69, allow_coordination_number=False)
        assert validate_date(1985, 7, 9, allow_coordination_number=False)
