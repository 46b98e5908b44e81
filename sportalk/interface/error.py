"""Translation of domain errors into HTTP responses."""

import logfire
from fastapi import HTTPException, status

from sportalk.domain.error import (
    BadRequestError,
    ConflictError,
    DomainError,
    InvalidRelationError,
    InvalidStatusTransitionError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)

# Checked in order, so subclasses must come before their bases
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (InvalidRelationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (InvalidStatusTransitionError, status.HTTP_409_CONFLICT),
    (ConflictError, status.HTTP_409_CONFLICT),
    (BadRequestError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
]


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error (400 for unmapped ones)."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def domain_error_to_http(error: DomainError, event: str) -> HTTPException:
    """Log an expected domain error and turn it into an HTTPException.

    Args:
        error: The domain error raised by a use case
        event: Log message describing the failed operation

    Returns:
        HTTPException with a ``{"code", "message"}`` detail
    """
    status_code = status_for(error)
    logfire.warn(event, code=error.code, error=error.message, status=status_code)
    return HTTPException(
        status_code=status_code,
        detail={"code": error.code, "message": error.message},
    )


def validation_error_to_http(error: ValueError, event: str) -> HTTPException:
    """Turn a request validation failure into a 422."""
    logfire.warn(event, error=str(error))
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={"code": ValidationError.code, "message": str(error)},
    )


def unexpected_error_to_http(error: Exception, event: str) -> HTTPException:
    """Log an unexpected failure and hide its details behind a 500."""
    logfire.error(event, error=str(error), error_type=type(error).__name__)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"code": "internal_error", "message": "Internal server error"},
    )
