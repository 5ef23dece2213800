"""Database session management."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from explainer.config import get_settings

settings = get_settings()


def engine_options() -> dict[str, Any]:
    """Pool and driver options for the configured backend."""
    if settings.is_sqlite:
        # aiosqlite uses its own pool class; sizing arguments are rejected
        return {"connect_args": {"check_same_thread": False}}
    options: dict[str, Any] = {
        "pool_pre_ping": True,
        "pool_size": 5,
        "max_overflow": 10,
    }
    if settings.database_requires_ssl:
        options["connect_args"] = {"ssl": "require"}
    return options


# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    **engine_options(),
)

# Session factory
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
