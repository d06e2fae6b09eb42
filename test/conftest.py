"""
Test Configuration and Fixtures

This module provides:
- Environment setup (SQLite test database, log directory, JWT secret)
- `database`: fresh schema per test for async integration tests
- `seeded_catalog` / `client`: fresh schema + demo catalog + TestClient for API tests
- `auth_headers`: Bearer token headers for a given user id

Architecture:
- Unit tests (test/**/unit/): AsyncMock repositories, no database
- Integration tests: real repositories on SQLite (aiosqlite) with BEGIN IMMEDIATE
  transactions, so concurrent writers serialize like row locks on PostgreSQL
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read once at import time of src.platform.config.core_setting
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    test_dir = Path(tempfile.mkdtemp(prefix='cinema_booking_test_'))
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{test_dir / "cinema_booking_test.db"}'
    os.environ['TEST_LOG_DIR'] = str(test_dir / 'logs')
    os.environ['AUTO_CREATE_TABLES'] = 'true'
    os.environ['SECRET_KEY'] = 'test_secret_key_for_pytest_only_0123456789'
    os.environ.setdefault('SERVICE_NAME', 'cinema-booking-test')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

import asyncio  # noqa: E402
from collections.abc import AsyncGenerator, Callable, Generator  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.database.orm_db_setting import (  # noqa: E402
    Database,
    create_db_and_tables,
    drop_db_and_tables,
    engine_manager,
)
from test.shared.auth import bearer_headers  # noqa: E402
from test.shared.catalog import SeededCatalog, seed_catalog  # noqa: E402


async def _reset_schema() -> None:
    await drop_db_and_tables()
    await create_db_and_tables()


# =============================================================================
# Async integration fixtures (run on the test's event loop)
# =============================================================================
@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    await _reset_schema()
    yield Database()
    await engine_manager.dispose()


@pytest.fixture
async def catalog(database: Database) -> SeededCatalog:
    return await seed_catalog(database.session)


# =============================================================================
# API fixtures (sync; TestClient runs the app on its own event loop)
# =============================================================================
@pytest.fixture
def seeded_catalog() -> SeededCatalog:
    async def _run() -> SeededCatalog:
        try:
            await _reset_schema()
            return await seed_catalog(Database().session)
        finally:
            # Engine is bound to this loop; the app creates its own
            await engine_manager.dispose()

    return asyncio.run(_run())


@pytest.fixture
def client(seeded_catalog: SeededCatalog) -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> Callable[..., dict[str, str]]:
    return bearer_headers
