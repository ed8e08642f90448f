"""Async SQLAlchemy engine, session factory, and declarative base."""

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from staybook.config import settings


def engine_options(url: str, echo: bool = False) -> dict[str, Any]:
    """Engine keyword arguments for the given URL.

    SQLite (used by the test-suite) runs on a single static connection, so
    the pool sizing used for PostgreSQL does not apply to it.
    """
    options: dict[str, Any] = {"echo": echo, "pool_pre_ping": True}
    if not url.startswith("sqlite"):
        options.update(pool_size=10, max_overflow=20)
    return options


engine = create_async_engine(
    settings.async_database_url,
    **engine_options(settings.async_database_url, echo=settings.debug),
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class TimestampMixin:
    """``created_at`` and ``updated_at`` set by the database clock.

    List endpoints order accommodations by ``created_at``.
    """

    created_at: Mapped[datetime] = mapped_column(server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        server_default=func.now(),
        onupdate=func.now(),
    )


class UUIDPrimaryKeyMixin:
    """UUID primary key assigned client-side on flush."""

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)


async def get_db() -> AsyncSession:  # type: ignore[misc]
    """Request-scoped session: one transaction per request.

    Commits after the handler returns and rolls back if it raises. The
    commit also releases the accommodation row lock taken by
    ``create_booking``, so admissions for one accommodation are serialized
    for exactly the life of the request.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
