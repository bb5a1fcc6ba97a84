from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MeetingCreate(BaseModel):
    id: Optional[str] = Field(default=None, min_length=1)
    title: str = Field(..., min_length=1)
    source_type: Optional[str] = None
    source_url: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    duration_minutes: Optional[int] = Field(default=None, gt=0, strict=True)


class MeetingUpdate(BaseModel):
    id: str
    title: Optional[str] = Field(default=None, min_length=1)
    source_type: Optional[str] = None
    source_url: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    duration_minutes: Optional[int] = Field(default=None, gt=0, strict=True)


class MeetingRef(BaseModel):
    id: str


class MeetingRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    user_id: str
    title: str
    source_type: Optional[str] = None
    source_url: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class MeetingResult(BaseModel):
    meeting: MeetingRead


class MeetingList(BaseModel):
    meetings: list[MeetingRead]
