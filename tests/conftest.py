"""Global pytest configuration."""

from __future__ import annotations

import pytest

from kcomb.logging import reset_logging


@pytest.fixture
def clean_logging():
    """Reset kcomb logging state before and after a test."""
    reset_logging()
    yield
    reset_logging()
