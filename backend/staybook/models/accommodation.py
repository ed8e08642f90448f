"""Accommodation model — hotels and apartments in a single table."""

import enum
from decimal import Decimal

from sqlalchemy import Boolean, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from staybook.database import Base, TimestampMixin, UUIDPrimaryKeyMixin


class AccommodationKind(str, enum.Enum):
    """Discriminator stored in ``accommodations.kind``."""

    HOTEL = "hotel"
    APARTMENT = "apartment"


class Accommodation(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A bookable hotel or apartment.

    Kind-specific columns are nullable and only meaningful for their kind:
    ``room_count`` and ``star_rating`` for hotels, ``number_of_rooms`` and
    ``has_parking`` for apartments.
    """

    __tablename__ = "accommodations"

    kind: Mapped[str] = mapped_column(String(20), nullable=False, index=True)  # hotel, apartment
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, default=None)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)

    # Hotel
    room_count: Mapped[int | None] = mapped_column(Integer, default=None)
    star_rating: Mapped[int | None] = mapped_column(Integer, default=None)

    # Apartment
    number_of_rooms: Mapped[int | None] = mapped_column(Integer, default=None)
    has_parking: Mapped[bool | None] = mapped_column(Boolean, default=None)

    # Relationships
    bookings: Mapped[list["Booking"]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="accommodation", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Accommodation(id={self.id}, name={self.name!r}, kind={self.kind!r})>"
