"""Shared API dependencies — single import point for all routers.

Re-exports the database session dependency and wires the booking repository
so that router modules can import everything they need from one place::

    from staybook.api.deps import get_db, get_booking_repository
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from staybook.database import get_db
from staybook.services.repository import BookingRepository


async def get_booking_repository(db: AsyncSession = Depends(get_db)) -> BookingRepository:
    """Repository bound to the request's session."""
    return BookingRepository(db)


__all__ = [
    "get_db",
    "get_booking_repository",
]
