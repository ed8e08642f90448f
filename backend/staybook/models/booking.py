"""Booking model."""

import uuid
from datetime import date, datetime

from sqlalchemy import CheckConstraint, Date, ForeignKey, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from staybook.database import Base, UUIDPrimaryKeyMixin


class Booking(UUIDPrimaryKeyMixin, Base):
    """A reservation of an accommodation for ``[start_date, end_date)``.

    ``end_date`` is the checkout day and is not occupied, so a booking ending
    on the 15th and one starting on the 15th do not conflict.
    """

    __tablename__ = "bookings"

    accommodation_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("accommodations.id", ondelete="CASCADE"),
        nullable=False,
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    guest_name: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(server_default=func.now())

    # Relationships
    accommodation: Mapped["Accommodation"] = relationship(back_populates="bookings")  # type: ignore[name-defined]  # noqa: F821

    __table_args__ = (
        CheckConstraint("start_date < end_date", name="ck_bookings_date_order"),
        Index("ix_bookings_accommodation_dates", "accommodation_id", "start_date", "end_date"),
    )

    def __repr__(self) -> str:
        return (
            f"<Booking(id={self.id}, accommodation_id={self.accommodation_id}, "
            f"start_date={self.start_date}, end_date={self.end_date})>"
        )
