"""Pytest configuration and shared fixtures."""

import pytest

from tests.fakes import FakeClock


@pytest.fixture
def clock():
    """Wednesday 2024-01-10 10:00 UTC — inside default working hours."""
    return FakeClock()
