"""
Test Configuration and Fixtures

This module provides:
- Environment setup before any application import (throwaway SQLite database)
- Schema reset per integration test
- Session-scoped TestClient

Architecture:
- Unit tests (test/**/unit/): Override fixtures with mocks in their own conftest.py
- Integration tests: Use a real database with the schema recreated per test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the log sinks read the environment at import time
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    db_path = Path(tempfile.gettempdir()) / f'restaurant_test_{worker_id}.db'
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_path}'
    os.environ['STRICT_BOOKING_MODE'] = 'false'
    os.environ.setdefault('SERVICE_NAME', 'restaurant-api-test')

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator, Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from src.platform.database.db_setting import Base  # noqa: E402
import src.service.restaurant.driven_adapter.model  # noqa: E402, F401


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.fixturenames.append('clean_database')  # type: ignore[attr-defined]


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
async def _reset_schema() -> None:
    engine = create_async_engine(os.environ['DATABASE_URL'], poolclass=NullPool)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
    finally:
        await engine.dispose()


@pytest.fixture(scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    await _reset_schema()
    yield


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[Any, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
