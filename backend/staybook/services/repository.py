"""SQLAlchemy-backed repository used by the booking core."""

from __future__ import annotations

import uuid
from datetime import date
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from staybook.models.accommodation import Accommodation
from staybook.models.booking import Booking
from staybook.services.occupancy import DateRange


class BookingStore(Protocol):
    """What the admission engine and availability calculator need from storage."""

    async def find_accommodation_by_id(
        self, accommodation_id: uuid.UUID, lock: bool = False
    ) -> Accommodation | None: ...

    async def find_bookings_overlapping(
        self, accommodation_id: uuid.UUID, date_range: DateRange
    ) -> list[Booking]: ...

    async def find_bookings_ending_after(
        self, accommodation_id: uuid.UUID, day: date
    ) -> list[Booking]: ...

    async def persist_booking(self, booking: Booking) -> Booking: ...


class BookingRepository:
    """BookingStore over an ``AsyncSession``.

    The session's transaction is owned by the caller (``get_db`` commits at
    the end of the request), so nothing here commits.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def find_accommodation_by_id(
        self, accommodation_id: uuid.UUID, lock: bool = False
    ) -> Accommodation | None:
        """Fetch an accommodation; ``lock`` takes a row lock until commit."""
        query = select(Accommodation).where(Accommodation.id == accommodation_id)
        if lock:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def find_bookings_overlapping(
        self, accommodation_id: uuid.UUID, date_range: DateRange
    ) -> list[Booking]:
        """Bookings with ``start_date < range.end AND end_date > range.start``."""
        result = await self.db.execute(
            select(Booking).where(
                Booking.accommodation_id == accommodation_id,
                Booking.start_date < date_range.end,
                Booking.end_date > date_range.start,
            )
        )
        return list(result.scalars().all())

    async def find_bookings_ending_after(self, accommodation_id: uuid.UUID, day: date) -> list[Booking]:
        """Bookings still occupying some day on or after ``day``, by start date."""
        result = await self.db.execute(
            select(Booking)
            .where(
                Booking.accommodation_id == accommodation_id,
                Booking.end_date > day,
            )
            .order_by(Booking.start_date.asc())
        )
        return list(result.scalars().all())

    async def persist_booking(self, booking: Booking) -> Booking:
        self.db.add(booking)
        await self.db.flush()
        await self.db.refresh(booking)
        return booking
