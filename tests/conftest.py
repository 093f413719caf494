"""Pytest configuration and fixtures for searchhub.

Environment is fixed before searchhub.main is imported: no Redis, no
telemetry exporter and no rate limiting, so the app runs self-contained.
DB-dependent fixtures skip unless DATABASE_URL points at a migrated Postgres.
"""

import os

os.environ["REDIS_ENABLED"] = "false"
os.environ["TELEMETRY_ENABLED"] = "false"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from searchhub.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from searchhub.infrastructure.persistence import database  # noqa: E402
from searchhub.main import app  # noqa: E402


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI, lifespan not run)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture(autouse=True)
def reset_dependency_overrides():
    """Drop any app.dependency_overrides a test installed."""
    yield
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository tests. Rolls back after the test.

    Requires DATABASE_URL (postgresql+asyncpg://...) with migrations applied.
    Skips when it is not configured; run without DB via: pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
