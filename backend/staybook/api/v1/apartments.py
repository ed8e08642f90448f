"""Apartments CRUD API router."""

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
    ApartmentCreate,
    ApartmentUpdate,
)
from staybook.schemas.common import MessageResponse

router = APIRouter(prefix="/api/v1/apartments", tags=["apartments"])


async def _get_apartment(apartment_id: uuid.UUID, db: AsyncSession) -> Accommodation:
    """Fetch an apartment or raise ``HTTPException 404``."""
    result = await db.execute(
        select(Accommodation).where(
            Accommodation.id == apartment_id,
            Accommodation.kind == AccommodationKind.APARTMENT.value,
        )
    )
    apartment = result.scalar_one_or_none()
    if apartment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Apartment not found",
        )
    return apartment


@router.post(
    "",
    response_model=AccommodationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new apartment",
)
async def create_apartment(
    body: ApartmentCreate,
    db: AsyncSession = Depends(get_db),
) -> AccommodationResponse:
    apartment = Accommodation(kind=AccommodationKind.APARTMENT.value, room_count=None, **body.model_dump())
    db.add(apartment)
    await db.flush()
    await db.refresh(apartment)
    return AccommodationResponse.model_validate(apartment)


@router.get(
    "",
    response_model=AccommodationListResponse,
    summary="List apartments",
)
async def list_apartments(
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
) -> AccommodationListResponse:
    kind_filter = Accommodation.kind == AccommodationKind.APARTMENT.value

    total_result = await db.execute(select(func.count()).select_from(Accommodation).where(kind_filter))
    total = total_result.scalar_one()

    result = await db.execute(
        select(Accommodation).where(kind_filter).order_by(Accommodation.created_at.desc()).offset(skip).limit(limit)
    )
    items = list(result.scalars().all())

    return AccommodationListResponse(
        items=[AccommodationResponse.model_validate(a) for a in items],
        total=total,
    )


@router.get(
    "/{apartment_id}",
    response_model=AccommodationResponse,
    summary="Get an apartment",
)
async def get_apartment(
    apartment_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> AccommodationResponse:
    apartment = await _get_apartment(apartment_id, db)
    return AccommodationResponse.model_validate(apartment)


@router.put(
    "/{apartment_id}",
    response_model=AccommodationResponse,
    summary="Update an apartment",
)
async def update_apartment(
    apartment_id: uuid.UUID,
    body: ApartmentUpdate,
    db: AsyncSession = Depends(get_db),
) -> AccommodationResponse:
    """Partially update an apartment."""
    apartment = await _get_apartment(apartment_id, db)

    for field, value in body.model_dump(exclude_unset=True).items():
        setattr(apartment, field, value)

    db.add(apartment)
    await db.flush()
    await db.refresh(apartment)
    return AccommodationResponse.model_validate(apartment)


@router.delete(
    "/{apartment_id}",
    response_model=MessageResponse,
    summary="Delete an apartment and its bookings",
)
async def delete_apartment(
    apartment_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> dict:
    apartment = await _get_apartment(apartment_id, db)

    await db.execute(delete(Booking).where(Booking.accommodation_id == apartment.id))
    await db.delete(apartment)
    await db.flush()
    return {"message": "Apartment deleted"}
