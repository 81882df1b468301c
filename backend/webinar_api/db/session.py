"""
Async engine and session factory construction.

The engine is the only process-wide resource: the container creates it at
startup and disposes of it at shutdown.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from webinar_api.core.config import Settings


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    options = {"echo": settings.DB_ECHO, "pool_pre_ping": True}
    # SQLite (used by tests and local runs) has no connection pool sizing
    if not settings.DATABASE_URL.startswith("sqlite"):
        options.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
        )
    return create_async_engine(settings.DATABASE_URL, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
