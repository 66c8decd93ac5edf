"""
Test Configuration and Fixtures

This module provides:
- Environment setup before any application module reads settings
- TestClient bound to the FastAPI app, with fresh in-memory stores per test
- SQLite (aiosqlite) database per test for repository integration tests
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time (src.platform.config.core_setting.settings)
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ['DATA_ACCESS_MODE'] = 'in_memory'
    os.environ['SEED_DEMO_DATA'] = 'true'
    os.environ['PAYMENT_MODE'] = 'simulated'
    os.environ['DEBUG'] = 'false'


_early_setup_test_environment()

from collections.abc import AsyncGenerator, Generator  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from src.main import app  # noqa: E402
from src.platform.config.di import container  # noqa: E402
from src.platform.database.orm_db_setting import Database, create_db_and_tables  # noqa: E402


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """App client over the seeded in-memory stores; state is discarded after each test."""
    container.reset_singletons()
    with TestClient(app) as test_client:
        yield test_client
    container.reset_singletons()


@pytest_asyncio.fixture
async def database(tmp_path: Path) -> AsyncGenerator[Database, None]:
    db = Database(url=f'sqlite+aiosqlite:///{tmp_path / "booking_test.db"}', echo=False)
    await create_db_and_tables(db)
    yield db
    await db.dispose()
