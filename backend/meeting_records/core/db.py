# backend/meeting_records/core/db.py
from __future__ import annotations

from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from meeting_records.core.settings import get_settings


def _build_engine():
    url = get_settings().DATABASE_URL
    common_kwargs = {
        "future": True,
        "pool_pre_ping": True,
        "pool_recycle": 1800,  # keep pool fresh
    }
    if url.startswith("sqlite"):
        # Required for SQLite with multi-threaded FastAPI
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            **common_kwargs,
        )
    return create_engine(url, **common_kwargs)


engine = _build_engine()

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
    future=True,
)

__all__ = ["SessionLocal", "engine", "get_db"]


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency: one session per request, always closed."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
