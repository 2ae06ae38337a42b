"""Exception handlers that turn errors into API envelopes."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from student_records.api.models import APIResponse

logger = logging.getLogger(__name__)


def format_validation_errors(errors: Sequence[Any]) -> str:
    """Join pydantic error entries into one readable message.

    The leading location part (``body``, ``path``, ``query``) is dropped, so
    an entry reads like ``idNumber: String should have at most 20 characters``.
    """
    parts = []
    for error in errors:
        loc = [str(p) for p in error.get("loc", ())]
        field = ".".join(loc[1:]) or (loc[0] if loc else "request")
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


def _envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse[None](success=False, message=message).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing exception handlers on an app."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        # A malformed path id never matches a route, like an unknown URL
        if any(tuple(e.get("loc", ()))[:1] == ("path",) for e in errors):
            return _envelope(
                status.HTTP_404_NOT_FOUND,
                f"Not found: {format_validation_errors(errors)}",
            )
        return _envelope(
            status.HTTP_400_BAD_REQUEST,
            f"Validation failed: {format_validation_errors(errors)}",
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            f"Internal Server Error: {exc}",
        )
