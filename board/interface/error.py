"""Translation of application errors into HTTP errors."""

import logfire
from fastapi import HTTPException, status
from pydantic import ValidationError as PydanticValidationError

from board.domain.error import (
    ConcurrentModificationError,
    InvalidCredentialsError,
    NotAuthorizedError,
    NotFoundError,
    UserAlreadyExistsError,
    ValidationError,
)
from board.util.jwt import JWTError


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """Map an error raised by a use case to an HTTP exception.

    Unexpected errors are logged and reported as a generic 500 naming the
    action, e.g. "Error adding comment".

    Args:
        error: Exception raised while handling the request
        action: What the request was doing, in gerund form

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, NotAuthorizedError):
        logfire.warn(
            "Unauthorized attempt",
            action=action,
            resource=error.resource,
            resource_id=error.resource_id,
            user_id=error.user_id,
        )
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))
    if isinstance(error, (ValidationError, PydanticValidationError)):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=_validation_detail(error)
        )
    if isinstance(error, ConcurrentModificationError):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Post was modified concurrently, please retry",
        )
    if isinstance(error, UserAlreadyExistsError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, (InvalidCredentialsError, JWTError)):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error)
        )

    logfire.error(f"Error {action}", error=str(error), error_type=type(error).__name__)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Error {action}"
    )


def _validation_detail(error: Exception) -> str:
    if isinstance(error, PydanticValidationError):
        return "; ".join(
            f"{'.'.join(str(part) for part in e['loc']) or 'value'}: {e['msg']}"
            for e in error.errors()
        )
    return str(error)
