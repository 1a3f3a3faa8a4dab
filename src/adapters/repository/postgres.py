"""
PostgreSQL repository adapter - Implements the account repository ports.

This module provides the PostgreSQL implementation of the domain's
account persistence ports using psycopg3 (async pool) with raw SQL.

Storage Identifier Remapping:
-----------------------------
Rows are keyed by a storage-assigned UUID column named `_id`. Records
leaving this adapter never expose `_id`; the value is moved to the
domain-level `id` field as a string.

Duplicate Emails:
-----------------
The UNIQUE constraint on `accounts.email` is the last line of defense
against concurrent sign-ups. `add()` uses ON CONFLICT DO NOTHING and
returns None when the insert was rejected, instead of raising.
"""

import logging
import uuid
from pathlib import Path
from typing import Any

from psycopg.rows import dict_row
from psycopg_pool import AsyncConnectionPool

from src.domain.models import Account, AddAccountParams

logger = logging.getLogger(__name__)


def map_account(row: dict[str, Any]) -> Account:
    """
    Convert a raw `accounts` row into an Account.

    Drops the storage identifier `_id` and exposes it as `id`.
    """
    record = dict(row)
    storage_id = record.pop("_id")
    return Account(id=str(storage_id), **record)


class PostgresAccountRepository:
    """
    Implements AddAccountRepository, LoadAccountByEmailRepository and
    LoadAccountByIdRepository protocols via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 AsyncConnectionPool for database connections
        """
        self._pool = pool

    async def add(self, account_data: AddAccountParams) -> Account | None:
        """
        Insert one account and return it with a normalized id.

        No validation happens here. Storage errors propagate unmodified.

        Args:
            account_data: Name, email and already-hashed password

        Returns:
            The stored account, or None if the email is already taken
        """
        sql = """
            INSERT INTO accounts (name, email, password)
            VALUES (%s, %s, %s)
            ON CONFLICT (email) DO NOTHING
            RETURNING _id, name, email, password, role
        """

        async with self._pool.connection() as conn, conn.cursor(row_factory=dict_row) as cursor:
            await cursor.execute(
                sql, (account_data.name, account_data.email, account_data.password)
            )
            row = await cursor.fetchone()
            await conn.commit()

        if row is None:
            logger.info("Account insert skipped, email already stored")
            return None
        return map_account(row)

    async def load_by_email(self, email: str) -> Account | None:
        """Load an account by exact (case-sensitive) email match."""
        sql = """
            SELECT _id, name, email, password, role
            FROM accounts
            WHERE email = %s
        """

        async with self._pool.connection() as conn, conn.cursor(row_factory=dict_row) as cursor:
            await cursor.execute(sql, (email,))
            row = await cursor.fetchone()

        return map_account(row) if row is not None else None

    async def load_by_id(self, account_id: str) -> Account | None:
        """
        Load an account by its normalized id.

        A malformed id cannot match any row and yields None.
        """
        try:
            storage_id = uuid.UUID(account_id)
        except ValueError:
            return None

        sql = """
            SELECT _id, name, email, password, role
            FROM accounts
            WHERE _id = %s
        """

        async with self._pool.connection() as conn, conn.cursor(row_factory=dict_row) as cursor:
            await cursor.execute(sql, (storage_id,))
            row = await cursor.fetchone()

        return map_account(row) if row is not None else None


MIGRATIONS_DIR = Path(__file__).resolve().parents[3] / "migrations"


async def run_migrations(pool: AsyncConnectionPool, migrations_dir: Path = MIGRATIONS_DIR) -> None:
    """
    Apply every `*.sql` file in `migrations_dir`, ordered by filename.

    Files are re-applied on each startup and must be idempotent. A failing
    file aborts startup with RuntimeError.
    """
    sql_files = sorted(migrations_dir.glob("*.sql")) if migrations_dir.is_dir() else []
    if not sql_files:
        logger.warning("No SQL migrations under %s", migrations_dir)
        return

    for sql_file in sql_files:
        try:
            async with pool.connection() as conn:
                await conn.execute(sql_file.read_text())
        except Exception as e:
            logger.error("Migration %s failed: %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
        logger.info("Applied migration %s", sql_file.name)
