"""
Integration tests for PostgresAccountRepository.

Tests repository operations against a real PostgreSQL database.
Requires PostgreSQL to be running (DATABASE_URL).
"""

import uuid

import pytest
from psycopg_pool import AsyncConnectionPool

from src.adapters.repository.postgres import PostgresAccountRepository
from src.domain.models import AddAccountParams

pytestmark = pytest.mark.integration


def make_params(email: str = "any_email@mail.com") -> AddAccountParams:
    return AddAccountParams(name="any_name", email=email, password="hashed_password")


class TestAdd:
    @pytest.mark.asyncio
    async def test_returns_account_with_normalized_id(
        self, repository: PostgresAccountRepository
    ) -> None:
        account = await repository.add(make_params())

        assert account is not None
        assert uuid.UUID(account.id)
        assert account.name == "any_name"
        assert account.email == "any_email@mail.com"
        assert account.password == "hashed_password"
        assert account.role is None

    @pytest.mark.asyncio
    async def test_persists_one_row(
        self, repository: PostgresAccountRepository, pool: AsyncConnectionPool
    ) -> None:
        account = await repository.add(make_params())

        async with pool.connection() as conn, conn.cursor() as cursor:
            await cursor.execute("SELECT _id, email FROM accounts")
            rows = await cursor.fetchall()

        assert len(rows) == 1
        assert str(rows[0][0]) == account.id
        assert rows[0][1] == "any_email@mail.com"

    @pytest.mark.asyncio
    async def test_duplicate_email_returns_none(
        self, repository: PostgresAccountRepository
    ) -> None:
        """Duplicate email is signaled by a falsy result, not an exception."""
        assert await repository.add(make_params()) is not None
        assert await repository.add(make_params()) is None

    @pytest.mark.asyncio
    async def test_email_uniqueness_is_case_sensitive(
        self, repository: PostgresAccountRepository
    ) -> None:
        assert await repository.add(make_params("user@mail.com")) is not None
        assert await repository.add(make_params("USER@mail.com")) is not None


class TestLoad:
    @pytest.mark.asyncio
    async def test_load_by_email(self, repository: PostgresAccountRepository) -> None:
        created = await repository.add(make_params())

        assert await repository.load_by_email("any_email@mail.com") == created

    @pytest.mark.asyncio
    async def test_load_by_email_unknown(self, repository: PostgresAccountRepository) -> None:
        assert await repository.load_by_email("unknown@mail.com") is None

    @pytest.mark.asyncio
    async def test_load_by_id(self, repository: PostgresAccountRepository) -> None:
        created = await repository.add(make_params())

        assert await repository.load_by_id(created.id) == created

    @pytest.mark.asyncio
    async def test_load_by_id_unknown(self, repository: PostgresAccountRepository) -> None:
        assert await repository.load_by_id(str(uuid.uuid4())) is None

    @pytest.mark.asyncio
    async def test_load_by_malformed_id(self, repository: PostgresAccountRepository) -> None:
        assert await repository.load_by_id("not-a-uuid") is None
