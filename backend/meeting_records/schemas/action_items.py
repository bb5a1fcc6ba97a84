from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ActionItemSave(BaseModel):
    """Insert when `id` is absent, otherwise replace every field of the item."""

    id: Optional[str] = None
    meeting_id: str
    assignee: Optional[str] = None
    description: str = Field(..., min_length=1)
    due_date: Optional[datetime] = None
    status: Optional[str] = None


class ActionItemFilter(BaseModel):
    meeting_id: Optional[str] = None


class ActionItemRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    meeting_id: str
    assignee: Optional[str] = None
    description: str
    due_date: Optional[datetime] = None
    status: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ActionItemResult(BaseModel):
    item: ActionItemRead


class ActionItemList(BaseModel):
    action_items: list[ActionItemRead]
