"""Pytest configuration and fixtures.

Provides shared test doubles and logging configuration. Fixtures here are
opt-in unless noted.
"""

from __future__ import annotations

import logging

import pytest

# =============================================================================
# Test Doubles
# =============================================================================


class CustomError(Exception):
    """Derived error type used to check that subclass identity survives."""


@pytest.fixture
def custom_error_type() -> type[CustomError]:
    """Return an Exception subclass for specialized-error tests."""
    return CustomError


@pytest.fixture
def failing_call() -> ValueError:
    """Return a fresh error with the canonical ``"fail"`` message."""
    return ValueError("fail")


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_library_logger():
    """Keep the library logger at WARNING so debug noise never hits reports."""
    logging.getLogger("fallible").setLevel(logging.WARNING)
