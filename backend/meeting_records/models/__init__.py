from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


# Import ORM models so that their tables are registered on Base.metadata.
# This ensures Base.metadata.create_all() sees meetings, sections and action items.
from meeting_records.models.meeting import Meeting  # noqa: E402
from meeting_records.models.section import MeetingSection  # noqa: E402
from meeting_records.models.action_item import ActionItem  # noqa: E402

__all__ = ["Base", "Meeting", "MeetingSection", "ActionItem"]
