from __future__ import annotations

from pydantic import BaseModel, Field


class CurrentUser(BaseModel):
    """The caller, as resolved by the auth gateway in front of this service."""

    id: str = Field(..., min_length=1)
