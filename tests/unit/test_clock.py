"""
Unit tests for the reference clock.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from identitet.clock import current_time, reference_year


class TestCurrentTime:
    """Tests for normalising the reference instant."""

    def test_default_is_aware_utc(self):
        """Test that the system clock is read in UTC."""
        now = current_time()
        assert now.tzinfo == timezone.utc

    def test_naive_datetime_is_utc(self):
        """Test that naive datetimes are taken as UTC."""
        assert current_time(datetime(2019, 7, 13, 12)) == datetime(2019, 7, 13, 12, tzinfo=timezone.utc)

    def test_aware_datetime_is_converted(self):
        """Test that aware datetimes are converted to UTC."""
        cest = timezone(timedelta(hours=2))
        assert current_time(datetime(2019, 1, 1, 1, tzinfo=cest)) == datetime(
            2018, 12, 31, 23, tzinfo=timezone.utc
        )

    def test_date_is_midnight(self):
        """Test that plain dates mean midnight UTC."""
        assert current_time(date(2019, 7, 13)) == datetime(2019, 7, 13, tzinfo=timezone.utc)

    def test_unsupported(self):
        """Test rejection of other types."""
        with pytest.raises(TypeError):
            current_time("2019-07-13")

    def test_reference_year(self):
        """Test the year of the reference instant."""
        assert reference_year(date(2019, 7, 13)) == 2019
