"""Error responses for the API."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from geobounds.models import ErrorResponse
from geobounds.validation import InputError, MissingInputError

logger = logging.getLogger(__name__)


def error_response(
    status_code: int,
    error: str,
    detail: str | None = None,
    fields: list[str] | None = None,
) -> JSONResponse:
    """Build a JSON error response with the standard ErrorResponse body."""
    body = ErrorResponse(error=error, detail=detail, fields=fields or [])
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def input_error_handler(request: Request, exc: InputError) -> JSONResponse:
    """
    Convert rejected query parameters into a response.

    Absent input is a 400; present but unusable input is a 422.
    """
    status_code = 400 if isinstance(exc, MissingInputError) else 422
    logger.info(f"Rejected {request.url.path}: {exc.message}")
    return error_response(status_code, exc.error, exc.message, exc.fields)
