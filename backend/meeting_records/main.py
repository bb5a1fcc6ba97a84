from __future__ import annotations

import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError

from meeting_records import __version__
from meeting_records.core.db import engine
from meeting_records.core.errors import (
    ActionError,
    action_error_handler,
    generic_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from meeting_records.core.logger import bind_request_context, configure_logging, get_logger
from meeting_records.core.settings import get_settings
from meeting_records.models import Base
from meeting_records.routers import actions, health

settings = get_settings()

# Configure structured logging for the API once at startup
configure_logging("api", settings.LOG_LEVEL)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    if settings.CREATE_TABLES_ON_STARTUP:
        # Dev convenience; deployed databases are managed by alembic.
        Base.metadata.create_all(bind=engine)
    logger.info("api started", extra={"app_env": settings.APP_ENV, "version": __version__})
    yield


app = FastAPI(title="Meeting Records", version=__version__, lifespan=lifespan)


# ---------------------------------------------------------------------------
# Request ID middleware
# ---------------------------------------------------------------------------


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """Attach a request_id to every log line and echo it back."""
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    bind_request_context(request_id)
    try:
        response = await call_next(request)
    finally:
        bind_request_context(None)
    response.headers["X-Request-Id"] = request_id
    return response


# ---------------------------------------------------------------------------
# Error envelope: {error, message, details}
# ---------------------------------------------------------------------------

app.add_exception_handler(ActionError, action_error_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)


# ---------------------------------------------------------------------------
# API routers
# ---------------------------------------------------------------------------

app.include_router(health.router)
app.include_router(actions.router)
