"""Accommodations API router — kind-agnostic reads and availability.

Hotels and apartments are created and edited through their own routers;
this one serves both kinds together.
"""

from __future__ import annotations

import uuid
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from staybook.api.deps import get_booking_repository, get_db
from staybook.api.errors import http_error
from staybook.models.accommodation import Accommodation, AccommodationKind
from staybook.schemas.accommodation import AccommodationListResponse, AccommodationResponse
from staybook.schemas.availability import AvailabilityResponse
from staybook.services.availability_service import get_next_available_date
from staybook.services.repository import BookingRepository

router = APIRouter(prefix="/api/v1/accommodations", tags=["accommodations"])


@router.get(
    "",
    response_model=AccommodationListResponse,
    summary="List hotels and apartments",
)
async def list_accommodations(
    kind: AccommodationKind | None = Query(None, description="Filter by accommodation kind"),
    skip: int = Query(0, ge=0, description="Pagination offset"),
    limit: int = Query(20, ge=1, le=100, description="Pagination limit"),
    db: AsyncSession = Depends(get_db),
) -> AccommodationListResponse:
    filters = []
    if kind is not None:
        filters.append(Accommodation.kind == kind.value)

    total_result = await db.execute(select(func.count()).select_from(Accommodation).where(*filters))
    total = total_result.scalar_one()

    result = await db.execute(
        select(Accommodation).where(*filters).order_by(Accommodation.created_at.desc()).offset(skip).limit(limit)
    )
    items = list(result.scalars().all())

    return AccommodationListResponse(
        items=[AccommodationResponse.model_validate(a) for a in items],
        total=total,
    )


@router.get(
    "/{accommodation_id}",
    response_model=AccommodationResponse,
    summary="Get an accommodation of either kind",
)
async def get_accommodation(
    accommodation_id: uuid.UUID,
    repo: BookingRepository = Depends(get_booking_repository),
) -> AccommodationResponse:
    accommodation = await repo.find_accommodation_by_id(accommodation_id)
    if accommodation is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Accommodation not found",
        )
    return AccommodationResponse.model_validate(accommodation)


@router.get(
    "/{accommodation_id}/availability",
    response_model=AvailabilityResponse,
    summary="Get the next available date for an accommodation",
)
async def get_availability(
    accommodation_id: uuid.UUID,
    requested: date = Query(..., alias="date", description="Reference date (YYYY-MM-DD)"),
    repo: BookingRepository = Depends(get_booking_repository),
) -> AvailabilityResponse:
    """Return the first date on or after ``date`` with a free slot.

    ``horizon_exceeded`` is true when nothing frees up within the configured
    horizon; ``next_available_date`` is then the horizon ceiling.
    """
    result = await get_next_available_date(repo, accommodation_id, requested)
    if not result.ok:
        raise http_error(result.error)
    return AvailabilityResponse.model_validate(result.data)
