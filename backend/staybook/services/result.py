"""ServiceResult and ServiceError: the return contract of the booking core.

Expected business outcomes (missing accommodation, bad range, no capacity)
come back as failed results; only programming errors and infrastructure
faults raise. The HTTP layer decides how each ``ErrorKind`` is reported.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, enum.Enum):
    """Failure categories returned by the core services."""

    NOT_FOUND = "not_found"
    INVALID_RANGE = "invalid_range"
    OVERLAP = "overlap"
    FULLY_BOOKED = "fully_booked"


@dataclass(frozen=True)
class ServiceError:
    """Structured error payload within a ServiceResult."""

    kind: ErrorKind
    message: str
    detail: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Either ``data`` (when ``ok``) or ``error`` (when not)."""

    ok: bool
    data: T | None = None
    error: ServiceError | None = None

    @classmethod
    def success(cls, data: T) -> ServiceResult[T]:
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, **detail: Any) -> ServiceResult[T]:
        return cls(ok=False, error=ServiceError(kind=kind, message=message, detail=detail))
