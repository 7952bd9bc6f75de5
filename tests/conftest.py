"""Pytest configuration and fixtures for storeadmin.

Uses storeadmin.main:app for HTTP tests. Option queries run against a mocked
AsyncSession; the statements it receives are compiled for SQL assertions.
Tests that load relationships of persisted records use db_session, an
in-memory SQLite database holding the store schema.
All imports use storeadmin.*.
"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.dialects import postgresql
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from storeadmin.core.location_context import set_location_id
from storeadmin.infrastructure.persistence import models  # noqa: F401
from storeadmin.infrastructure.persistence.database import Base
from storeadmin.main import app


def make_session(rows: list[dict[str, Any]] | None = None, record: Any = None) -> AsyncMock:
    """AsyncSession double: execute() returns `rows` as mappings, get() returns `record`."""
    session = AsyncMock()
    result = MagicMock()
    result.mappings.return_value.all.return_value = list(rows or [])
    session.execute = AsyncMock(return_value=result)
    session.get = AsyncMock(return_value=record)
    return session


def compile_sql(stmt: Any) -> str:
    """Render a statement as PostgreSQL SQL with literal values inlined."""
    return str(
        stmt.compile(
            dialect=postgresql.dialect(),
            compile_kwargs={"literal_binds": True},
        )
    )


def executed_sql(session: AsyncMock) -> str:
    """SQL of the last statement the session executed."""
    return compile_sql(session.execute.call_args.args[0])


@pytest.fixture(autouse=True)
def _clear_location_context():
    """Each test starts and ends without an active location."""
    set_location_id(None)
    yield
    set_location_id(None)


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session() -> AsyncSession:
    """Session over a fresh in-memory store database. Rolls back after test."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session
        await session.rollback()
    await engine.dispose()
