"""Pydantic v2 request/response schemas for hotel, apartment and accommodation endpoints."""

import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class _AccommodationBase(BaseModel):
    name: str = Field(..., min_length=3, max_length=255)
    description: str | None = None
    price: Decimal = Field(..., gt=0)
    location: str = Field(..., min_length=2, max_length=255)


class _AccommodationPatch(BaseModel):
    name: str | None = Field(None, min_length=3, max_length=255)
    description: str | None = None
    price: Decimal | None = Field(None, gt=0)
    location: str | None = Field(None, min_length=2, max_length=255)

    @model_validator(mode="after")
    def _reject_cleared_required_fields(self) -> "_AccommodationPatch":
        """Omitted fields stay unchanged; name, price and location cannot be cleared."""
        cleared = [
            f for f in ("name", "price", "location") if f in self.model_fields_set and getattr(self, f) is None
        ]
        if cleared:
            raise ValueError(f"{', '.join(cleared)} cannot be null")
        return self


class HotelCreate(_AccommodationBase):
    """Schema for creating a new hotel. ``room_count`` defaults to 1."""

    star_rating: int | None = Field(None, ge=1, le=5)
    room_count: int = Field(1, ge=1)


class HotelUpdate(_AccommodationPatch):
    """Schema for partially updating a hotel. All fields optional."""

    star_rating: int | None = Field(None, ge=1, le=5)
    room_count: int | None = Field(None, ge=1)


class ApartmentCreate(_AccommodationBase):
    """Schema for creating a new apartment."""

    number_of_rooms: int | None = Field(None, ge=1)
    has_parking: bool | None = None


class ApartmentUpdate(_AccommodationPatch):
    """Schema for partially updating an apartment. All fields optional."""

    number_of_rooms: int | None = Field(None, ge=1)
    has_parking: bool | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class AccommodationResponse(BaseModel):
    """Accommodation as returned by every hotel/apartment endpoint.

    Kind-specific fields are null for the other kind.
    """

    id: uuid.UUID
    kind: str
    name: str
    description: str | None = None
    price: Decimal
    location: str
    room_count: int | None = None
    star_rating: int | None = None
    number_of_rooms: int | None = None
    has_parking: bool | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AccommodationListResponse(BaseModel):
    """Paginated list of accommodations."""

    items: list[AccommodationResponse]
    total: int
