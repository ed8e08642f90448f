"""Shared test configuration and fixtures.

Every test gets a fresh database: by default an in-memory SQLite database
(via aiosqlite) with the schema created from the models. Set
``TEST_DATABASE_URL`` to run against PostgreSQL instead. Within a test the
session runs inside a transaction that always rolls back.
"""

import os
import uuid
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from staybook.database import Base, get_db
from staybook.main import app

_test_db_url = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


def _make_engine():
    if _test_db_url.startswith("sqlite"):
        # One shared connection, otherwise each checkout sees an empty database.
        return create_async_engine(_test_db_url, echo=False, poolclass=StaticPool)
    return create_async_engine(_test_db_url, echo=False, pool_pre_ping=True)


# ---------------------------------------------------------------------------
# Per-test: fresh schema + transactional rollback for isolation
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def test_engine():
    """Create an engine with all tables, dropped again after the test."""
    engine = _make_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Yield an async session wrapped in a transaction that always rolls back."""
    async with test_engine.connect() as connection:
        transaction = await connection.begin()
        session = AsyncSession(bind=connection, expire_on_commit=False)

        try:
            yield session
        finally:
            await session.close()
            await transaction.rollback()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to use the test DB session."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Convenience fixtures: accommodations created via the API
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def test_hotel(client: AsyncClient) -> dict:
    """A two-room hotel."""
    response = await client.post(
        "/api/v1/hotels",
        json={
            "name": "Small Hotel",
            "price": 100,
            "location": "Boston",
            "star_rating": 3,
            "room_count": 2,
        },
    )
    assert response.status_code == 201, f"Failed to create test hotel: {response.text}"
    return response.json()


@pytest_asyncio.fixture
async def test_apartment(client: AsyncClient) -> dict:
    response = await client.post(
        "/api/v1/apartments",
        json={
            "name": "Studio Apartment",
            "price": 80,
            "location": "Manhattan",
            "number_of_rooms": 1,
            "has_parking": False,
        },
    )
    assert response.status_code == 201, f"Failed to create test apartment: {response.text}"
    return response.json()


@pytest.fixture
def book(client: AsyncClient):
    """Return a coroutine function that POSTs a booking and returns the raw response."""

    async def _book(accommodation_id: str, start: str, end: str, guest: str | None = None):
        return await client.post(
            "/api/v1/bookings",
            json={
                "accommodation_id": accommodation_id,
                "start_date": start,
                "end_date": end,
                "guest_name": guest or f"Guest {uuid.uuid4().hex[:6]}",
            },
        )

    return _book
