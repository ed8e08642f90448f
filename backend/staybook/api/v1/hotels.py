"""Hotels CRUD API router."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from staybook.api.deps import get_db
from staybook.models.accommodation import Accommodation, AccommodationKind
from staybook.models.booking import Booking
from staybook.schemas.accommodation import (
    AccommodationListResponse,
    AccommodationResponse,
    HotelCreate,
    HotelUpdate,
)
from staybook.schemas.common import MessageResponse

router = APIRouter(prefix="/api/v1/hotels", tags=["hotels"])


async def _get_hotel(hotel_id: uuid.UUID, db: AsyncSession) -> Accommodation:
    """Fetch a hotel or raise ``HTTPException 404``."""
    result = await db.execute(
        select(Accommodation).where(
            Accommodation.id == hotel_id,
            Accommodation.kind == AccommodationKind.HOTEL.value,
        )
    )
    hotel = result.scalar_one_or_none()
    if hotel is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Hotel not found",
        )
    return hotel


@router.post(
    "",
    response_model=AccommodationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new hotel",
)
async def create_hotel(
    body: HotelCreate,
    db: AsyncSession = Depends(get_db),
) -> AccommodationResponse:
    hotel = Accommodation(kind=AccommodationKind.HOTEL.value, **body.model_dump())
    db.add(hotel)
    await db.flush()
    await db.refresh(hotel)
    return AccommodationResponse.model_validate(hotel)


@router.get(
    "",
    response_model=AccommodationListResponse,
    summary="List hotels",
)
async def list_hotels(
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
) -> AccommodationListResponse:
    kind_filter = Accommodation.kind == AccommodationKind.HOTEL.value

    total_result = await db.execute(select(func.count()).select_from(Accommodation).where(kind_filter))
    total = total_result.scalar_one()

    result = await db.execute(
        select(Accommodation).where(kind_filter).order_by(Accommodation.created_at.desc()).offset(skip).limit(limit)
    )
    items = list(result.scalars().all())

    return AccommodationListResponse(
        items=[AccommodationResponse.model_validate(h) for h in items],
        total=total,
    )


@router.get(
    "/{hotel_id}",
    response_model=AccommodationResponse,
    summary="Get a hotel",
)
async def get_hotel(
    hotel_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> AccommodationResponse:
    hotel = await _get_hotel(hotel_id, db)
    return AccommodationResponse.model_validate(hotel)


@router.put(
    "/{hotel_id}",
    response_model=AccommodationResponse,
    summary="Update a hotel",
)
async def update_hotel(
    hotel_id: uuid.UUID,
    body: HotelUpdate,
    db: AsyncSession = Depends(get_db),
) -> AccommodationResponse:
    """Partially update a hotel.

    Lowering ``room_count`` does not touch existing bookings; it only affects
    future admissions and availability queries.
    """
    hotel = await _get_hotel(hotel_id, db)

    for field, value in body.model_dump(exclude_unset=True).items():
        setattr(hotel, field, value)

    db.add(hotel)
    await db.flush()
    await db.refresh(hotel)
    return AccommodationResponse.model_validate(hotel)


@router.delete(
    "/{hotel_id}",
    response_model=MessageResponse,
    summary="Delete a hotel and its bookings",
)
async def delete_hotel(
    hotel_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> dict:
    hotel = await _get_hotel(hotel_id, db)

    await db.execute(delete(Booking).where(Booking.accommodation_id == hotel.id))
    await db.delete(hotel)
    await db.flush()
    return {"message": "Hotel deleted"}
