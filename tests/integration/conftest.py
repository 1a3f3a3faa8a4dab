"""
Fixtures for database-backed integration tests.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from psycopg_pool import AsyncConnectionPool

from src.adapters.repository.postgres import PostgresAccountRepository, run_migrations
from src.config.settings import get_settings


@pytest_asyncio.fixture
async def pool() -> AsyncGenerator[AsyncConnectionPool, None]:
    """Create a migrated connection pool with an empty accounts table."""
    pool = AsyncConnectionPool(
        conninfo=get_settings().database_url,
        min_size=1,
        max_size=4,
        open=False,
    )
    await pool.open()
    await run_migrations(pool)
    async with pool.connection() as conn:
        await conn.execute("DELETE FROM accounts")
    yield pool
    await pool.close()


@pytest_asyncio.fixture
async def repository(pool: AsyncConnectionPool) -> PostgresAccountRepository:
    return PostgresAccountRepository(pool)
