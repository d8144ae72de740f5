"""Translate service exceptions into HTTP responses."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from approval.core.exceptions import (
    AlreadyExistsError,
    ApprovalError,
    InvalidArgumentError,
    InvalidEnumValueError,
    NotFoundError,
    ParticipantNotEligibleError,
)

logger = logging.getLogger(__name__)

_STATUS_CODES: tuple[tuple[type[ApprovalError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidEnumValueError, status.HTTP_400_BAD_REQUEST),
    (InvalidArgumentError, status.HTTP_400_BAD_REQUEST),
    (AlreadyExistsError, status.HTTP_409_CONFLICT),
    (ParticipantNotEligibleError, status.HTTP_400_BAD_REQUEST),
)


def status_code_for(exc: ApprovalError) -> int:
    for exc_type, status_code in _STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_approval_error(request: Request, exc: ApprovalError) -> JSONResponse:
    status_code = status_code_for(exc)
    logger.warning(
        "%s %s failed with %s: %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc,
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def register_exception_handlers(application: FastAPI) -> None:
    """Install the handler mapping approval errors to status codes."""
    application.add_exception_handler(ApprovalError, handle_approval_error)  # type: ignore[arg-type]


__all__ = ["handle_approval_error", "register_exception_handlers", "status_code_for"]
