"""Repository adapters - Database implementations."""

from .postgres import PostgresAccountRepository, map_account, run_migrations

__all__ = ["PostgresAccountRepository", "map_account", "run_migrations"]
