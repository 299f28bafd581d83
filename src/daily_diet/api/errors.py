"""Translation of service failures into HTTP responses."""

import logging
from collections.abc import Callable
from typing import NoReturn, TypeVar

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from daily_diet.domain.errors import ErrorKind, Failure

logger = logging.getLogger(__name__)

T = TypeVar("T")

_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NO_LINKED_USER: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.EMAIL_TAKEN: status.HTTP_409_CONFLICT,
    ErrorKind.SESSION_HAS_USER: status.HTTP_409_CONFLICT,
    ErrorKind.STORAGE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def raise_for_failure(failure: Failure) -> NoReturn:
    """Raise the HTTP error matching a failure kind."""
    raise HTTPException(
        status_code=_STATUS_BY_KIND[failure.kind], detail=failure.message
    )


def run_guarded(action: str, call: Callable[[], T]) -> T:
    """Run a service call, hiding unexpected errors behind a generic 500."""
    try:
        return call()
    except Exception:
        logger.exception("Unexpected failure", extra={"action": action})
        raise_for_failure(Failure(ErrorKind.STORAGE_FAILURE, f"Failed to {action}"))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report request validation errors as 400 with the first message."""
    errors = [
        {"loc": list(error.get("loc", ())), "msg": str(error.get("msg", ""))}
        for error in exc.errors()
    ]
    logger.info("Rejected invalid request", extra={"path": request.url.path})
    detail = errors[0]["msg"] if errors else "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": detail, "errors": errors},
    )
