from __future__ import annotations

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from meeting_records.core.db import SessionLocal

router = APIRouter(tags=["health"])


def _check_db() -> dict:
    try:
        with SessionLocal() as session:
            session.execute(text("SELECT 1"))
        return {"status": "ok"}
    except SQLAlchemyError as exc:
        return {"status": "error", "detail": str(exc)}


@router.get("/healthz", include_in_schema=False)
def healthz() -> dict:
    """
    Combined liveness/readiness endpoint.

    - DB: simple SELECT 1
    """
    db = _check_db()
    status = "ok" if db["status"] == "ok" else "degraded"
    return {"status": status, "db": db}
