"""Bookings API router.

Bookings are immutable once admitted: there is no update or delete
endpoint. Creation goes through the admission engine, which enforces the
accommodation's capacity.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from staybook.api.deps import get_booking_repository, get_db
from staybook.api.errors import http_error
from staybook.models.booking import Booking
from staybook.schemas.booking import BookingCreate, BookingListResponse, BookingResponse
from staybook.services.booking_service import create_booking
from staybook.services.occupancy import make_date_range
from staybook.services.repository import BookingRepository

router = APIRouter(prefix="/api/v1/bookings", tags=["bookings"])


@router.post(
    "",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new booking",
    responses={
        404: {"description": "Accommodation not found"},
        409: {"description": "Overlap (single-capacity) or fully booked (multi-room hotel)"},
    },
)
async def create_booking_endpoint(
    body: BookingCreate,
    repo: BookingRepository = Depends(get_booking_repository),
) -> BookingResponse:
    """Admit a booking if the accommodation has capacity for every night of it."""
    date_range = make_date_range(body.start_date, body.end_date)
    if not date_range.ok:
        raise http_error(date_range.error)

    result = await create_booking(repo, body.accommodation_id, date_range.data, body.guest_name)
    if not result.ok:
        raise http_error(result.error)
    return BookingResponse.model_validate(result.data)


@router.get(
    "",
    response_model=BookingListResponse,
    summary="List bookings",
)
async def list_bookings(
    accommodation_id: uuid.UUID | None = Query(None, description="Filter by accommodation"),
    skip: int = Query(0, ge=0, description="Pagination offset"),
    limit: int = Query(20, ge=1, le=100, description="Pagination limit"),
    db: AsyncSession = Depends(get_db),
) -> BookingListResponse:
    filters = []
    if accommodation_id is not None:
        filters.append(Booking.accommodation_id == accommodation_id)

    total_result = await db.execute(select(func.count()).select_from(Booking).where(*filters))
    total = total_result.scalar_one()

    result = await db.execute(
        select(Booking).where(*filters).order_by(Booking.start_date.asc()).offset(skip).limit(limit)
    )
    items = list(result.scalars().all())

    return BookingListResponse(
        items=[BookingResponse.model_validate(b) for b in items],
        total=total,
    )


@router.get(
    "/{booking_id}",
    response_model=BookingResponse,
    summary="Get a booking",
)
async def get_booking(
    booking_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> BookingResponse:
    result = await db.execute(select(Booking).where(Booking.id == booking_id))
    booking = result.scalar_one_or_none()

    if booking is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Booking not found",
        )
    return BookingResponse.model_validate(booking)
