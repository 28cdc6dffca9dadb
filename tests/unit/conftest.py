"""
Shared fixtures for unit tests.

This module provides common fixtures used across multiple test modules:
- Mock database session
- YieldCalculator instance with default terms
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from yield_calculator import DEFAULT_TERMS, YieldCalculator


@pytest.fixture
def mock_session():
    """
    Mock async database session.

    Returns:
        AsyncMock: Mocked async session for database operations
    """
    session = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def calculator():
    """
    Create YieldCalculator with default terms.

    Returns:
        YieldCalculator: 1% daily yield, 0.5% referral, 24h cooldown
    """
    return YieldCalculator(DEFAULT_TERMS)
