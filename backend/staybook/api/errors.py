"""Translate core ServiceError kinds into HTTP errors."""

from fastapi import HTTPException, status

from staybook.services.result import ErrorKind, ServiceError

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_RANGE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.OVERLAP: status.HTTP_409_CONFLICT,
    ErrorKind.FULLY_BOOKED: status.HTTP_409_CONFLICT,
}


def http_error(error: ServiceError) -> HTTPException:
    """Build the HTTPException a router should raise for ``error``."""
    return HTTPException(
        status_code=_STATUS_BY_KIND[error.kind],
        detail={"message": error.message, "error": error.kind.value, **error.detail},
    )
