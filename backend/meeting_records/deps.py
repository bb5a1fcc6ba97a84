# backend/meeting_records/deps.py
from __future__ import annotations

from typing import Optional

from fastapi import Header, HTTPException, Request, status

from meeting_records.core.db import get_db
from meeting_records.core.settings import get_settings
from meeting_records.schemas.users import CurrentUser


def get_current_user(request: Request) -> Optional[CurrentUser]:
    """
    Resolve the caller from the identity header set by the auth gateway.

    Returns None when the header is missing or blank; the actions decide
    how to treat an anonymous caller.
    """
    raw = request.headers.get(get_settings().USER_ID_HEADER)
    user_id = (raw or "").strip()
    if not user_id:
        return None
    return CurrentUser(id=user_id)


async def require_api_key(
    x_api_key: Optional[str] = Header(
        default=None,
        alias="X-API-Key",  # exact header name expected from clients
        convert_underscores=False,
    ),
) -> bool:
    """
    Header-based API key guard.

    If no key is configured, requests are allowed. Otherwise clients must
    send the same value in the X-API-Key header.
    """
    expected = get_settings().API_KEY
    if not expected or x_api_key == expected:
        return True

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or missing API key",
    )


__all__ = ["get_current_user", "get_db", "require_api_key"]
