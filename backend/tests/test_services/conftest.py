"""In-memory BookingStore for exercising the core without a database."""

import uuid
from datetime import date
from decimal import Decimal

import pytest

from staybook.models.accommodation import Accommodation, AccommodationKind
from staybook.models.booking import Booking
from staybook.services.occupancy import DateRange, overlaps


class InMemoryBookingStore:
    """Dict/list backed store that records calls and writes."""

    def __init__(self) -> None:
        self.accommodations: dict[uuid.UUID, Accommodation] = {}
        self.bookings: list[Booking] = []
        self.persisted: list[Booking] = []
        self.locked: list[uuid.UUID] = []

    # -- setup helpers -----------------------------------------------------

    def add_hotel(self, room_count: int | None = 1) -> Accommodation:
        return self._add(AccommodationKind.HOTEL, room_count=room_count)

    def add_apartment(self) -> Accommodation:
        return self._add(AccommodationKind.APARTMENT, room_count=None)

    def _add(self, kind: AccommodationKind, **fields) -> Accommodation:
        accommodation = Accommodation(
            id=uuid.uuid4(),
            kind=kind.value,
            name=f"Test {kind.value}",
            price=Decimal("100.00"),
            location="Testville",
            **fields,
        )
        self.accommodations[accommodation.id] = accommodation
        return accommodation

    def add_booking(self, accommodation: Accommodation, start: str, end: str) -> Booking:
        booking = Booking(
            id=uuid.uuid4(),
            accommodation_id=accommodation.id,
            start_date=date.fromisoformat(start),
            end_date=date.fromisoformat(end),
            guest_name="Existing Guest",
        )
        self.bookings.append(booking)
        return booking

    # -- BookingStore ------------------------------------------------------

    async def find_accommodation_by_id(self, accommodation_id: uuid.UUID, lock: bool = False):
        if lock:
            self.locked.append(accommodation_id)
        return self.accommodations.get(accommodation_id)

    async def find_bookings_overlapping(self, accommodation_id: uuid.UUID, date_range: DateRange):
        return [
            b
            for b in self.bookings
            if b.accommodation_id == accommodation_id and overlaps(DateRange.of(b), date_range)
        ]

    async def find_bookings_ending_after(self, accommodation_id: uuid.UUID, day: date):
        matching = [b for b in self.bookings if b.accommodation_id == accommodation_id and b.end_date > day]
        return sorted(matching, key=lambda b: b.start_date)

    async def persist_booking(self, booking: Booking) -> Booking:
        booking.id = uuid.uuid4()
        self.bookings.append(booking)
        self.persisted.append(booking)
        return booking


@pytest.fixture
def store() -> InMemoryBookingStore:
    return InMemoryBookingStore()
