"""
Pytest configuration and shared fixtures for identitet tests.
"""

from datetime import datetime, timezone

import pytest

from identitet.personnummer import ParseOptions


@pytest.fixture
def reference_time() -> datetime:
    """Fixed clock used by the century and age tests."""
    return datetime(2019, 7, 13, tzinfo=timezone.utc)


@pytest.fixture
def strict_options() -> ParseOptions:
    """Options rejecting samordningsnummer."""
    return ParseOptions(allow_coordination_number=False)
