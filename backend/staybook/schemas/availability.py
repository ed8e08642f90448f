"""Response schema for the availability endpoint."""

import uuid
from datetime import date

from pydantic import BaseModel, ConfigDict


class AvailabilityResponse(BaseModel):
    """Next date the accommodation has room for one more booking."""

    accommodation_id: uuid.UUID
    requested_date: date
    next_available_date: date
    is_requested_date_available: bool
    horizon_exceeded: bool = False

    model_config = ConfigDict(from_attributes=True)
