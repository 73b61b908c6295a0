"""Translate service-layer errors into HTTP responses."""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from ..services import (
    ConflictError,
    ConstraintViolationError,
    EntityNotFoundError,
    GymServiceError,
    InvalidStateError,
)

LOGGER = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ConstraintViolationError, status.HTTP_409_CONFLICT),
    (InvalidStateError, status.HTTP_400_BAD_REQUEST),
)


def http_error(exc: GymServiceError) -> HTTPException:
    """Build the ``HTTPException`` matching a service error and log the rejection."""

    status_code = status.HTTP_400_BAD_REQUEST
    for error_type, mapped_status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            status_code = mapped_status
            break
    LOGGER.warning(
        "Rejecting request: %s",
        exc,
        extra={"error_type": type(exc).__name__, "status_code": status_code},
    )
    return HTTPException(status_code=status_code, detail=str(exc))
