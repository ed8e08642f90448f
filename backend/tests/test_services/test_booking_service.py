"""Tests for the admission engine (no database)."""

import uuid
from datetime import date

import pytest

from staybook.services.booking_service import admit_booking, create_booking
from staybook.services.occupancy import DateRange
from staybook.services.result import ErrorKind


def _r(start: str, end: str) -> DateRange:
    return DateRange(date.fromisoformat(start), date.fromisoformat(end))


class TestAdmitBooking:
    """Pure decision given the overlapping set."""

    def test_admits_below_capacity(self, store):
        hotel = store.add_hotel(room_count=2)
        existing = store.add_booking(hotel, "2024-01-10", "2024-01-20")

        result = admit_booking(hotel, _r("2024-01-15", "2024-01-20"), "Ann", [existing])

        assert result.ok
        assert result.data.accommodation_id == hotel.id
        assert result.data.start_date == date(2024, 1, 15)
        assert result.data.end_date == date(2024, 1, 20)
        assert result.data.guest_name == "Ann"

    def test_apartment_conflict_is_overlap(self, store):
        apartment = store.add_apartment()
        existing = store.add_booking(apartment, "2024-01-10", "2024-01-20")

        result = admit_booking(apartment, _r("2024-01-15", "2024-01-25"), "Ann", [existing])

        assert not result.ok
        assert result.error.kind is ErrorKind.OVERLAP
        assert "apartment" in result.error.message
        assert result.error.detail == {"occupied": 1, "capacity": 1}

    def test_single_room_hotel_conflict_is_overlap(self, store):
        hotel = store.add_hotel(room_count=None)
        existing = store.add_booking(hotel, "2024-01-10", "2024-01-20")

        result = admit_booking(hotel, _r("2024-01-12", "2024-01-14"), "Ann", [existing])

        assert result.error.kind is ErrorKind.OVERLAP
        assert "hotel" in result.error.message

    def test_multi_room_hotel_conflict_is_fully_booked(self, store):
        hotel = store.add_hotel(room_count=2)
        existing = [
            store.add_booking(hotel, "2024-01-10", "2024-01-20"),
            store.add_booking(hotel, "2024-01-12", "2024-01-18"),
        ]

        result = admit_booking(hotel, _r("2024-01-15", "2024-01-20"), "Ann", existing)

        assert result.error.kind is ErrorKind.FULLY_BOOKED
        assert result.error.detail == {"occupied": 2, "capacity": 2}


class TestCreateBooking:
    """Admission plus persistence through a BookingStore."""

    @pytest.mark.asyncio
    async def test_apartment_rejects_overlap(self, store):
        apartment = store.add_apartment()
        store.add_booking(apartment, "2024-01-10", "2024-01-20")

        result = await create_booking(store, apartment.id, _r("2024-01-15", "2024-01-25"), "Bob")

        assert result.error.kind is ErrorKind.OVERLAP
        assert store.persisted == []

    @pytest.mark.asyncio
    async def test_apartment_accepts_adjacent(self, store):
        apartment = store.add_apartment()
        store.add_booking(apartment, "2024-01-10", "2024-01-20")

        result = await create_booking(store, apartment.id, _r("2024-01-20", "2024-01-25"), "Bob")

        assert result.ok
        assert result.data.id is not None
        assert store.persisted == [result.data]

    @pytest.mark.asyncio
    async def test_hotel_with_two_rooms_fully_booked(self, store):
        hotel = store.add_hotel(room_count=2)
        store.add_booking(hotel, "2024-01-10", "2024-01-20")
        store.add_booking(hotel, "2024-01-12", "2024-01-18")

        result = await create_booking(store, hotel.id, _r("2024-01-15", "2024-01-20"), "Bob")

        assert result.error.kind is ErrorKind.FULLY_BOOKED
        assert store.persisted == []

    @pytest.mark.asyncio
    async def test_hotel_with_three_rooms_accepts(self, store):
        hotel = store.add_hotel(room_count=3)
        store.add_booking(hotel, "2024-01-10", "2024-01-20")
        store.add_booking(hotel, "2024-01-12", "2024-01-18")

        result = await create_booking(store, hotel.id, _r("2024-01-15", "2024-01-20"), "Bob")

        assert result.ok
        assert len(store.persisted) == 1

    @pytest.mark.asyncio
    async def test_bookings_on_other_accommodations_ignored(self, store):
        apartment = store.add_apartment()
        other = store.add_apartment()
        store.add_booking(other, "2024-01-10", "2024-01-20")

        result = await create_booking(store, apartment.id, _r("2024-01-10", "2024-01-20"), "Bob")

        assert result.ok

    @pytest.mark.asyncio
    async def test_locks_accommodation_before_deciding(self, store):
        apartment = store.add_apartment()

        await create_booking(store, apartment.id, _r("2024-01-10", "2024-01-12"), "Bob")

        assert store.locked == [apartment.id]

    @pytest.mark.asyncio
    async def test_not_found_performs_no_write(self, store):
        missing = uuid.uuid4()

        result = await create_booking(store, missing, _r("2024-01-10", "2024-01-12"), "Bob")

        assert result.error.kind is ErrorKind.NOT_FOUND
        assert result.error.detail["accommodation_id"] == str(missing)
        assert store.persisted == []

    @pytest.mark.asyncio
    async def test_invalid_range_is_rejected_before_lookup(self, store):
        apartment = store.add_apartment()

        result = await create_booking(store, apartment.id, _r("2024-01-12", "2024-01-12"), "Bob")

        assert result.error.kind is ErrorKind.INVALID_RANGE
        assert result.error.detail == {"start_date": "2024-01-12", "end_date": "2024-01-12"}
        assert store.locked == []
        assert store.persisted == []
