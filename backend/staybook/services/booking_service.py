"""Admission rules for new bookings."""

import logging
import uuid
from collections.abc import Sequence

from staybook.models.accommodation import Accommodation, AccommodationKind
from staybook.models.booking import Booking
from staybook.services.occupancy import DateRange, capacity_of, make_date_range
from staybook.services.repository import BookingStore
from staybook.services.result import ErrorKind, ServiceResult

logger = logging.getLogger(__name__)


def admit_booking(
    accommodation: Accommodation,
    date_range: DateRange,
    guest_name: str,
    overlapping: Sequence[Booking],
) -> ServiceResult[Booking]:
    """Decide admission against the bookings that overlap ``date_range``.

    ``overlapping`` must already be exactly the overlapping set; it is only
    counted here. On success the returned Booking is not yet persisted.
    """
    capacity = capacity_of(accommodation)
    occupied = len(overlapping)

    if occupied < capacity:
        return ServiceResult.success(
            Booking(
                accommodation_id=accommodation.id,
                start_date=date_range.start,
                end_date=date_range.end,
                guest_name=guest_name,
            )
        )

    if capacity == 1:
        noun = "apartment" if accommodation.kind == AccommodationKind.APARTMENT.value else "hotel"
        return ServiceResult.failure(
            ErrorKind.OVERLAP,
            f"Booking dates overlap with an existing booking for this {noun}",
            occupied=occupied,
            capacity=capacity,
        )
    return ServiceResult.failure(
        ErrorKind.FULLY_BOOKED,
        "Hotel is fully booked for the requested dates",
        occupied=occupied,
        capacity=capacity,
    )


async def create_booking(
    store: BookingStore,
    accommodation_id: uuid.UUID,
    date_range: DateRange,
    guest_name: str,
) -> ServiceResult[Booking]:
    """Admit and persist a booking, or explain why it was refused.

    The accommodation row is locked for the rest of the transaction so two
    concurrent admissions for the same accommodation cannot both pass the
    capacity check. Nothing is written unless admission succeeds.
    """
    checked = make_date_range(date_range.start, date_range.end)
    if not checked.ok:
        return checked

    accommodation = await store.find_accommodation_by_id(accommodation_id, lock=True)
    if accommodation is None:
        return ServiceResult.failure(
            ErrorKind.NOT_FOUND, "Accommodation not found", accommodation_id=str(accommodation_id)
        )

    overlapping = await store.find_bookings_overlapping(accommodation_id, date_range)
    decision = admit_booking(accommodation, date_range, guest_name, overlapping)
    if not decision.ok:
        logger.info(
            "Booking refused for accommodation %s (%s to %s): %s",
            accommodation_id,
            date_range.start,
            date_range.end,
            decision.error.kind.value,
        )
        return decision

    booking = await store.persist_booking(decision.data)
    logger.info(
        "Booking %s created for accommodation %s (%s to %s)",
        booking.id,
        accommodation_id,
        date_range.start,
        date_range.end,
    )
    return ServiceResult.success(booking)
