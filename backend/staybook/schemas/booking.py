"""Pydantic v2 request/response schemas for booking endpoints."""

import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class BookingCreate(BaseModel):
    """Schema for creating a new booking."""

    accommodation_id: uuid.UUID
    start_date: date
    end_date: date
    guest_name: str = Field(..., min_length=1, max_length=255)

    @model_validator(mode="after")
    def check_dates(self) -> "BookingCreate":
        """Validate that end_date is strictly after start_date."""
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class BookingResponse(BaseModel):
    """Booking as stored."""

    id: uuid.UUID
    accommodation_id: uuid.UUID
    start_date: date
    end_date: date
    guest_name: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BookingListResponse(BaseModel):
    """Paginated list of bookings."""

    items: list[BookingResponse]
    total: int
