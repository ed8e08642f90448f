"""Seed the database with sample hotels, apartments and bookings.

Every booking goes through the admission engine, so the seed can never put
an accommodation over capacity; requests the engine refuses are reported
and skipped.

Run from the backend directory:
    python -m scripts.seed_data
"""

import asyncio
import sys
from datetime import date, timedelta
from decimal import Decimal
from pathlib import Path

# Add backend to path so imports work when run as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from staybook.database import async_session_factory
from staybook.models.accommodation import Accommodation, AccommodationKind
from staybook.models.booking import Booking
from staybook.services.booking_service import create_booking
from staybook.services.occupancy import DateRange
from staybook.services.repository import BookingRepository

# ---------------------------------------------------------------------------
# Seed data definitions
# ---------------------------------------------------------------------------

HOTELS = [
    {
        "name": "Grand Harbour Hotel",
        "description": "Waterfront hotel with a rooftop bar, five minutes from the ferry terminal.",
        "price": Decimal("150.00"),
        "location": "New York",
        "star_rating": 4,
        "room_count": 3,
    },
    {
        "name": "Small Corner Hotel",
        "description": "Family-run hotel with two guest rooms above a bakery.",
        "price": Decimal("95.00"),
        "location": "Boston",
        "star_rating": 3,
        "room_count": 2,
    },
]

APARTMENTS = [
    {
        "name": "Cozy Brooklyn Apartment",
        "description": "One-bedroom walk-up with a small balcony.",
        "price": Decimal("80.00"),
        "location": "Brooklyn",
        "number_of_rooms": 1,
        "has_parking": False,
    },
    {
        "name": "Beach Apartment",
        "description": "Two-bedroom apartment a block from the pier.",
        "price": Decimal("120.00"),
        "location": "Santa Monica",
        "number_of_rooms": 2,
        "has_parking": True,
    },
]


# Offsets are days from today. The last request for each of the first three
# accommodations collides with the earlier ones, so the seed shows refusals.
BOOKING_REQUESTS = [
    # --- Grand Harbour Hotel (3 rooms) ---
    {"name": "Grand Harbour Hotel", "guest": "James Wilson", "start": 2, "end": 7},
    {"name": "Grand Harbour Hotel", "guest": "Chloe Williams", "start": 3, "end": 6},
    {"name": "Grand Harbour Hotel", "guest": "Emma Thompson", "start": 5, "end": 9},
    {"name": "Grand Harbour Hotel", "guest": "Sarah Chen", "start": 5, "end": 6},
    # --- Small Corner Hotel (2 rooms) ---
    {"name": "Small Corner Hotel", "guest": "Yuki Tanaka", "start": 0, "end": 10},
    {"name": "Small Corner Hotel", "guest": "Marie Dubois", "start": 2, "end": 8},
    {"name": "Small Corner Hotel", "guest": "Henrik Johansson", "start": 5, "end": 10},
    # --- Cozy Brooklyn Apartment ---
    {"name": "Cozy Brooklyn Apartment", "guest": "Ananya Sharma", "start": 0, "end": 10},
    {"name": "Cozy Brooklyn Apartment", "guest": "Liam O'Brien", "start": 10, "end": 15},
    {"name": "Cozy Brooklyn Apartment", "guest": "Olivia Martinez", "start": 12, "end": 14},
    # --- Beach Apartment ---
    {"name": "Beach Apartment", "guest": "David Kim", "start": 20, "end": 27},
]


# ---------------------------------------------------------------------------
# Main seed function
# ---------------------------------------------------------------------------


async def seed_session(session: AsyncSession, today: date) -> dict[str, int]:
    """Wipe and populate the tables through ``session`` without committing.

    Returns:
        Counts of created hotels, apartments and bookings, and of refused
        booking requests.
    """
    await session.execute(delete(Booking))
    await session.execute(delete(Accommodation))
    await session.flush()

    created: dict[str, Accommodation] = {}
    for kind, rows in ((AccommodationKind.HOTEL, HOTELS), (AccommodationKind.APARTMENT, APARTMENTS)):
        for data in rows:
            accommodation = Accommodation(kind=kind.value, **data)
            session.add(accommodation)
            await session.flush()
            created[accommodation.name] = accommodation
            print(f"   🏨 {accommodation.name} — {accommodation.location} ({kind.value})")

    repo = BookingRepository(session)
    booked = 0
    refused = 0
    for request in BOOKING_REQUESTS:
        accommodation = created[request["name"]]
        result = await create_booking(
            repo,
            accommodation.id,
            DateRange(today + timedelta(days=request["start"]), today + timedelta(days=request["end"])),
            request["guest"],
        )
        if result.ok:
            booked += 1
        else:
            refused += 1
            print(f"   ⛔ {request['guest']} @ {accommodation.name}: {result.error.message}")

    return {
        "hotels": len(HOTELS),
        "apartments": len(APARTMENTS),
        "bookings": booked,
        "refused": refused,
    }


async def seed() -> None:
    """Populate the configured database with sample data and commit."""
    async with async_session_factory() as session:
        counts = await seed_session(session, date.today())
        await session.commit()

    print()
    print("=" * 60)
    print("📊 Seed Summary")
    print("=" * 60)
    print(f"   Hotels:     {counts['hotels']}")
    print(f"   Apartments: {counts['apartments']}")
    print(f"   Bookings:   {counts['bookings']}")
    print(f"   Refused:    {counts['refused']}")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(seed())
