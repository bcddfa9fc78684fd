# Standard library imports
import logging

# External package imports
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from ..application.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

logger = logging.getLogger(__name__)

INVALID_REQUEST_MESSAGE = "Invalid request data"

_STATUS_BY_ERROR = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (PersistenceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def to_http_exception(exception: ValueError) -> HTTPException:
    """
    Translate a use case error into an HTTPException

    Args:
        exception: Error raised by a use case

    Returns:
        HTTPException with the matching status; plain ValueError maps to 400
    """
    for error_class, status_code in _STATUS_BY_ERROR:
        if isinstance(exception, error_class):
            break
    else:
        status_code = status.HTTP_400_BAD_REQUEST

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"Request failed: {exception}")
    return HTTPException(status_code=status_code, detail=str(exception))


def register_exception_handlers(application: FastAPI) -> None:
    """Render every error as the {success: false, message} envelope"""

    @application.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning(f"Validation error for request {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": INVALID_REQUEST_MESSAGE},
        )

    @application.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled error for request {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": "Internal server error"},
        )
