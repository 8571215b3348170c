"""Translate exceptions into JSON error responses.

Every error leaves the API in one shape::

    {"detail": "...", "code": "USER_NOT_FOUND"}

Validation failures add ``"violations": [{"field": ..., "message": ...}]``
so a client can fix all of its input at once.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from userhub.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from userhub.domain.user import UserValidationError

logger = logging.getLogger(__name__)

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    ErrorCode.PERSISTENCE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Used when a code has no entry above; first matching base class wins
_STATUS_BY_BASE_CLASS: list[tuple[type[DomainException], int]] = [
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
]


def _get_status_for_exception(exc: DomainException) -> int:
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]
    for base, status_code in _STATUS_BY_BASE_CLASS:
        if isinstance(exc, base):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    violations: Optional[list[dict[str, Any]]] = None,
) -> JSONResponse:
    body: dict[str, Any] = {"detail": message, "code": code}
    if violations is not None:
        body["violations"] = violations
    return JSONResponse(status_code=status_code, content=body)


def _field_from_location(loc: tuple) -> str:
    """('body', 'email') -> 'email'; ('path', 'user_id') -> 'path.user_id'."""
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts) if parts else "body"


def setup_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on ``app``.

    Parameters
    ----------
    app
        Application to register the handlers on
    """

    @app.exception_handler(UserValidationError)
    async def user_validation_exception_handler(
        request: Request,
        exc: UserValidationError,
    ) -> JSONResponse:
        logger.warning(
            "%s %s rejected, invalid fields: %s",
            request.method,
            request.url.path,
            ", ".join(sorted(exc.fields)),
        )
        return _create_error_response(
            status.HTTP_400_BAD_REQUEST,
            exc.message,
            exc.code.value,
            violations=[v.to_dict() for v in exc.sorted_violations],
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Map the error code to a status; details go to the log only."""
        status_code = _get_status_for_exception(exc)

        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "%s %s failed [%s]: %s",
                request.method,
                request.url.path,
                exc.code.value,
                exc.message,
                exc_info=exc,
            )
        else:
            logger.warning(
                "%s %s rejected [%s]: %s %s",
                request.method,
                request.url.path,
                exc.code.value,
                exc.message,
                exc.details,
            )

        return _create_error_response(status_code, exc.message, exc.code.value)

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Unparseable bodies and bad path params look like field violations."""
        violations = [
            {
                "field": _field_from_location(tuple(err.get("loc", ()))),
                "message": err.get("msg", ""),
            }
            for err in exc.errors()
        ]
        logger.warning(
            "%s %s malformed: %s",
            request.method,
            request.url.path,
            violations,
        )
        return _create_error_response(
            status.HTTP_400_BAD_REQUEST,
            "Malformed request",
            ErrorCode.VALIDATION_ERROR.value,
            violations=violations,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(
            "Unhandled error on %s %s",
            request.method,
            request.url.path,
        )
        return _create_error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An internal error occurred",
            ErrorCode.INTERNAL_ERROR.value,
        )
