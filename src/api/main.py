"""
Application entry point.

Builds the FastAPI app: routes under /api, the health probe, and a
lifespan that owns the database pool.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from psycopg_pool import AsyncConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.adapters import register_exception_handlers
from src.api.v1 import router as v1_router
from src.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

tags_metadata = [
    {
        "name": "v1",
        "description": "Accounts API v1 - Sign up, log in, and access-token protected routes",
    },
]


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open and migrate the account store, expose the pool on app.state."""
    settings = get_settings()
    configure_logging(settings)

    if settings.uses_default_jwt_secret:
        logger.warning("JWT_SECRET is not set; access tokens are signed with the default key")

    pool = AsyncConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        open=False,
    )
    await pool.open()
    logger.info(
        "Account store pool opened (%d-%d connections)",
        settings.pool_min_size,
        settings.pool_max_size,
    )

    await run_migrations(pool)
    app.state.pool = pool

    yield

    await pool.close()
    logger.info("Account store pool closed")


app = FastAPI(
    title="accounts-auth",
    description="Account sign-up, login, and role-gated access tokens",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(v1_router, prefix="/api")
register_exception_handlers(app)


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """Report healthy once the account store answers a trivial query."""
    async with request.app.state.pool.connection() as conn:
        await conn.execute("SELECT 1")

    return {"status": "healthy"}
