"""
Unit test configuration for the restaurant service.

Overrides fixtures from the parent conftest so unit tests never touch the
database or start the TestClient lifespan.
"""

from collections.abc import AsyncGenerator, Generator
from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock, Mock

from fastapi.testclient import TestClient
import pytest

from src.service.restaurant.domain.entity.reservation_entity import Reservation
from src.service.restaurant.domain.entity.table_entity import Table


@pytest.fixture(autouse=True, scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    """No-op override for unit tests - no real database needed"""
    yield


@pytest.fixture(scope='session')
def client() -> Generator[MagicMock, None, None]:
    """Mock client for unit tests - prevents TestClient/lifespan from being created"""
    yield MagicMock(spec=TestClient)


# Fixed clock: 2030-01-10 12:00, a Thursday well before every requested slot
NOW = datetime(2030, 1, 10, 12, 0)
DINNER = datetime(2030, 1, 15, 19, 0)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def dinner_time() -> datetime:
    return DINNER


@pytest.fixture
def table_for_four() -> Table:
    return Table(id=2, table_number=12, capacity=4)


@pytest.fixture
def confirmed_reservation(table_for_four: Table) -> Reservation:
    return Reservation(
        id=7,
        customer_id=1,
        table_id=table_for_four.id or 0,
        reservation_time=DINNER,
        party_size=3,
        special_requests='Birthday',
        created_at=NOW - timedelta(days=1),
    )


@pytest.fixture
def mock_reservation_command_repo() -> Mock:
    repo = Mock()
    repo.create = AsyncMock()
    repo.get_by_id = AsyncMock()
    repo.update = AsyncMock(return_value=True)
    repo.cancel = AsyncMock(return_value=True)
    return repo


@pytest.fixture
def mock_availability_handler() -> Mock:
    handler = Mock()
    handler.find_available_table = AsyncMock()
    handler.list_time_slots = AsyncMock()
    return handler
