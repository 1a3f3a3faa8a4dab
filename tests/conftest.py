"""
Shared test fixtures and configuration.

Integration tests need a reachable PostgreSQL at DATABASE_URL and are
skipped otherwise.
"""

from functools import lru_cache

import psycopg
import pytest

from src.config.settings import get_settings


@lru_cache
def database_available() -> bool:
    try:
        with psycopg.connect(get_settings().database_url, connect_timeout=2):
            return True
    except psycopg.OperationalError:
        return False


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    skip_db = pytest.mark.skip(reason="PostgreSQL not reachable at DATABASE_URL")
    for item in items:
        if "integration" in item.keywords and not database_available():
            item.add_marker(skip_db)
