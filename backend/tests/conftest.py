"""Pytest configuration and fixtures."""

import pytest

from comed.pricing.sink import RecordingSink


@pytest.fixture
def sink() -> RecordingSink:
    """A fresh in-memory display sink."""
    return RecordingSink()
