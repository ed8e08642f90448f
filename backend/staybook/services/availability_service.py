"""Next date an accommodation has a free slot."""

import logging
import uuid
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, timedelta

from staybook.config import settings
from staybook.services.occupancy import HasDates, capacity_of, occupying
from staybook.services.repository import BookingStore
from staybook.services.result import ErrorKind, ServiceResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AvailabilityReport:
    """Outcome of an availability query.

    When ``horizon_exceeded`` is set, ``next_available_date`` is the scan
    ceiling rather than a date known to be free.
    """

    accommodation_id: uuid.UUID
    requested_date: date
    next_available_date: date
    is_requested_date_available: bool
    horizon_exceeded: bool = False


def find_next_available_date(
    bookings: Sequence[HasDates],
    from_date: date,
    capacity: int,
    horizon_days: int = 365,
) -> tuple[date, bool]:
    """Scan forward from ``from_date`` for the first day below capacity.

    Instead of stepping one day at a time, a full day jumps straight to the
    earliest checkout among the bookings occupying it, so the number of
    iterations is bounded by the number of distinct end dates.

    Returns:
        A tuple of (date, horizon_exceeded). The ceiling
        ``from_date + horizon_days`` is returned when nothing frees up before
        it, clamped to ``date.max``.
    """
    ceiling = from_date + timedelta(days=min(horizon_days, (date.max - from_date).days))
    current = from_date

    while current <= ceiling:
        occupied = occupying(bookings, current)
        if len(occupied) < capacity:
            return current, False

        if occupied:
            current = min(b.end_date for b in occupied)
        elif current == ceiling:
            break
        else:
            current += timedelta(days=1)

    return ceiling, True


async def get_next_available_date(
    store: BookingStore,
    accommodation_id: uuid.UUID,
    from_date: date,
    horizon_days: int | None = None,
) -> ServiceResult[AvailabilityReport]:
    """Compute the availability report for one accommodation."""
    accommodation = await store.find_accommodation_by_id(accommodation_id)
    if accommodation is None:
        return ServiceResult.failure(
            ErrorKind.NOT_FOUND, "Accommodation not found", accommodation_id=str(accommodation_id)
        )

    if horizon_days is None:
        horizon_days = settings.availability_horizon_days

    bookings = await store.find_bookings_ending_after(accommodation_id, from_date)
    next_date, horizon_exceeded = find_next_available_date(
        bookings, from_date, capacity_of(accommodation), horizon_days
    )
    if horizon_exceeded:
        logger.warning(
            "No availability for accommodation %s within %d days of %s",
            accommodation_id,
            horizon_days,
            from_date,
        )

    return ServiceResult.success(
        AvailabilityReport(
            accommodation_id=accommodation_id,
            requested_date=from_date,
            next_available_date=next_date,
            is_requested_date_available=next_date == from_date,
            horizon_exceeded=horizon_exceeded,
        )
    )
