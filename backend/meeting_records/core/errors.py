# backend/meeting_records/core/errors.py
from __future__ import annotations

from typing import Any, Optional

from fastapi import HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.status import (
    HTTP_401_UNAUTHORIZED,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from meeting_records.core.logger import get_logger

log = get_logger(__name__)


class ApiError(BaseModel):
    error: str
    message: str
    details: Optional[Any] = None


class ActionError(Exception):
    """Base for failures an action reports back to its caller."""

    code = "ACTION_ERROR"
    status_code = 400
    default_message = "The action could not be completed."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(ActionError):
    code = "UNAUTHORIZED"
    status_code = HTTP_401_UNAUTHORIZED
    default_message = "You must be signed in to perform this action."


class NotFound(ActionError):
    """Missing and not-owned records are reported the same way."""

    code = "NOT_FOUND"
    status_code = HTTP_404_NOT_FOUND
    default_message = "Not found."


class Conflict(ActionError):
    code = "CONFLICT"
    status_code = HTTP_409_CONFLICT
    default_message = "A record with this id already exists."


def error_response(status_code: int, error: str, message: str, details: Any = None) -> JSONResponse:
    payload = ApiError(error=error, message=message, details=details).model_dump()
    return JSONResponse(status_code=status_code, content=payload)


async def action_error_handler(request: Request, exc: ActionError) -> JSONResponse:
    log.info(
        "ActionError",
        extra={"path": request.url.path, "status": exc.status_code, "code": exc.code},
    )
    return error_response(exc.status_code, exc.code, exc.message)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    # Normalize all HTTPExceptions into {error, message, details}
    detail = exc.detail
    if isinstance(detail, dict) and "error" in detail and "message" in detail:
        payload = detail
    else:
        payload = {
            "error": getattr(exc, "name", "HTTPError"),
            "message": str(detail),
            "details": None,
        }
    log.warning("HTTPException", extra={"path": request.url.path, "status": exc.status_code, "payload": payload})
    return JSONResponse(status_code=exc.status_code, content=payload, headers=dict(exc.headers or {}))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = exc.errors()
    log.warning("ValidationError", extra={"path": request.url.path, "details": details})
    return JSONResponse(
        status_code=422,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "details": _jsonable(details),
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log.error("Unhandled exception", extra={"path": request.url.path}, exc_info=exc)
    return error_response(
        HTTP_500_INTERNAL_SERVER_ERROR,
        "InternalServerError",
        "An unexpected error occurred",
    )


def _jsonable(errors: Any) -> Any:
    # pydantic error dicts may carry exception objects under "ctx"
    return jsonable_encoder(errors, custom_encoder={Exception: str})
