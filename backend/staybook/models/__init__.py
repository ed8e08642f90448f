"""SQLAlchemy models for Staybook.

All models are imported here so that Alembic's autogenerate can discover
them via Base.metadata. If you add a new model, import it in this file.
"""

from staybook.models.accommodation import Accommodation, AccommodationKind
from staybook.models.booking import Booking

__all__ = [
    "Accommodation",
    "AccommodationKind",
    "Booking",
]
