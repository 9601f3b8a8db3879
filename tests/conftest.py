"""Pytest configuration and fixtures."""

import pytest

from notempty import NotEmpty


@pytest.fixture
def validator() -> NotEmpty:
    """Validator with the default rule set."""
    return NotEmpty()
