"""Database engine and session management."""

from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from core.config import settings


def _engine_options() -> dict[str, Any]:
    """Pool sizing applies only to drivers that pool connections."""
    options: dict[str, Any] = {"echo": settings.debug, "pool_pre_ping": True}
    if not settings.async_database_url.startswith("sqlite"):
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
    return options


# One engine per process; every request's unit of work draws from its pool
engine = create_async_engine(settings.async_database_url, **_engine_options())

async_session_factory = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session for endpoints that query outside a unit of work."""
    async with async_session_factory() as session:
        yield session
