from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SectionSave(BaseModel):
    """Insert when `id` is absent, otherwise replace the existing section."""

    id: Optional[str] = None
    meeting_id: str
    type: str = Field(..., min_length=1)
    order_index: int = Field(..., gt=0, strict=True)
    content: str = Field(..., min_length=1)


class SectionRef(BaseModel):
    id: str
    meeting_id: str


class SectionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    meeting_id: str
    type: str
    order_index: int
    content: str
    created_at: datetime


class SectionResult(BaseModel):
    section: SectionRead
