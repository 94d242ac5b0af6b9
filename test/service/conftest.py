"""
Fixtures for use case unit tests - no database.

The mock unit of work is an async context manager that yields itself and
exposes AsyncMock repositories.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_uow() -> MagicMock:
    uow = MagicMock()
    uow.__aenter__.return_value = uow
    uow.__aexit__.return_value = False  # never swallow exceptions
    uow.commit = AsyncMock()
    uow.showtime_repo = AsyncMock()
    uow.booking_repo = AsyncMock()
    uow.movie_repo = AsyncMock()
    return uow


@pytest.fixture
def mock_uow_factory(mock_uow: MagicMock) -> MagicMock:
    return MagicMock(return_value=mock_uow)
