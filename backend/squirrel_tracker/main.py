"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from squirrel_tracker.config import get_settings
from squirrel_tracker.infrastructure.database import Base, engine
from squirrel_tracker.infrastructure.logging.log_config import setup_logging
from squirrel_tracker.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _ensure_database_exists() -> None:
    """Create the PostgreSQL database if it does not yet exist.

    Connects to the default ``postgres`` maintenance database, checks for the
    target database name, and issues ``CREATE DATABASE`` when missing.
    SQLite URLs need nothing; the file is created on first connect.
    """
    from urllib.parse import urlparse

    settings = get_settings()
    if not settings.database_url.startswith("postgresql://"):
        return

    import asyncpg

    parsed = urlparse(settings.database_url)
    db_name = parsed.path.lstrip("/")
    if not db_name:
        return

    maintenance_url = settings.database_url.rsplit("/", 1)[0] + "/postgres"

    try:
        conn = await asyncpg.connect(maintenance_url)
        try:
            exists = await conn.fetchval(
                "SELECT 1 FROM pg_database WHERE datname = $1", db_name
            )
            if not exists:
                # CREATE DATABASE cannot run inside a transaction block
                await conn.execute(f'CREATE DATABASE "{db_name}"')
                logger.info("Created database '%s'", db_name)
            else:
                logger.debug("Database '%s' already exists", db_name)
        finally:
            await conn.close()
    except Exception as exc:
        logger.warning("Could not auto-create database '%s': %s", db_name, exc)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and create tables."""
    setup_logging()

    await _ensure_database_exists()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Sighting tables ready")

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "squirrel_tracker.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
