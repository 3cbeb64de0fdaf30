from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from tests.fixtures.clock import FixedClock


@pytest.fixture
def mock_uow():
    """Mock unit of work"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def clock():
    """Clock frozen at Monday 2024-03-04 09:00 UTC"""
    return FixedClock(datetime(2024, 3, 4, 9, 0, 0))
