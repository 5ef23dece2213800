"""Pytest configuration and fixtures."""

import os

# Settings are read once at import time; point them at a throwaway database
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")

import pytest
from collections.abc import AsyncGenerator
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from explainer.api.deps import create_access_token
from explainer.db.base import Base
from explainer.db.session import get_db
from explainer.main import app

ALICE = "user-alice"
BOB = "user-bob"


@pytest.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)

    await engine.dispose()


@pytest.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing FastAPI endpoints."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


def auth_headers(subject: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(subject)}"}


@pytest.fixture
def alice() -> dict[str, str]:
    return auth_headers(ALICE)


@pytest.fixture
def bob() -> dict[str, str]:
    return auth_headers(BOB)


@pytest.fixture
def make_concept(client, alice):
    """Create a concept through the API and return its JSON."""

    async def _make(headers: dict[str, str] | None = None, **fields) -> dict:
        fields.setdefault("title", "Big-O")
        resp = await client.post("/concepts/", json=fields, headers=headers or alice)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make
