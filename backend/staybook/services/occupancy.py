"""Overlap and capacity rules shared by admission and availability.

Everything here is pure: no I/O, no session, no clock.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from staybook.models.accommodation import AccommodationKind
from staybook.services.result import ErrorKind, ServiceResult


class HasKind(Protocol):
    kind: str
    room_count: int | None


class HasDates(Protocol):
    start_date: date
    end_date: date


@dataclass(frozen=True)
class DateRange:
    """Half-open calendar interval ``[start, end)``.

    ``start`` is the first occupied day and ``end`` the first free one.
    """

    start: date
    end: date

    @property
    def is_empty(self) -> bool:
        return self.start >= self.end

    def contains(self, day: date) -> bool:
        return self.start <= day < self.end

    @classmethod
    def of(cls, booking: HasDates) -> DateRange:
        return cls(booking.start_date, booking.end_date)


def make_date_range(start: date, end: date) -> ServiceResult[DateRange]:
    """Build a DateRange, failing with INVALID_RANGE unless ``start < end``."""
    date_range = DateRange(start, end)
    if date_range.is_empty:
        return ServiceResult.failure(
            ErrorKind.INVALID_RANGE,
            "end_date must be after start_date",
            start_date=start.isoformat(),
            end_date=end.isoformat(),
        )
    return ServiceResult.success(date_range)


def overlaps(a: DateRange, b: DateRange) -> bool:
    """True when the two half-open ranges share at least one day.

    Adjacent ranges (``a.end == b.start``) do not overlap.
    """
    return a.start < b.end and a.end > b.start


def capacity_of(accommodation: HasKind) -> int:
    """Number of bookings the accommodation may hold on any single day."""
    kind = AccommodationKind(accommodation.kind)
    if kind is AccommodationKind.APARTMENT:
        return 1
    if kind is AccommodationKind.HOTEL:
        return max(accommodation.room_count or 1, 1)
    raise ValueError(f"Unknown accommodation kind: {accommodation.kind!r}")


def occupying(bookings: Iterable[HasDates], day: date) -> list[HasDates]:
    """Bookings whose range contains ``day``."""
    return [b for b in bookings if DateRange.of(b).contains(day)]
