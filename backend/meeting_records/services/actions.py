"""
Meeting, section and action-item actions.

Every action takes the caller explicitly and scopes its work to meetings
the caller owns. A meeting that exists but belongs to someone else is
reported exactly like one that does not exist.
"""

from __future__ import annotations

import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from meeting_records.core.errors import Conflict, NotFound, Unauthorized
from meeting_records.core.logger import get_logger
from meeting_records.models import ActionItem, Meeting, MeetingSection
from meeting_records.models.timestamps import utcnow
from meeting_records.schemas.action_items import ActionItemFilter, ActionItemSave
from meeting_records.schemas.meetings import MeetingCreate, MeetingRef, MeetingUpdate
from meeting_records.schemas.sections import SectionRef, SectionSave
from meeting_records.schemas.users import CurrentUser

logger = get_logger(__name__)

MEETING_NOT_FOUND = "Meeting not found."
MEETING_ID_TAKEN = "A meeting with this id already exists."
SECTION_NOT_FOUND = "Section not found."
ACTION_ITEM_NOT_FOUND = "Action item not found."


def require_user(user: Optional[CurrentUser]) -> CurrentUser:
    if user is None or not user.id:
        raise Unauthorized()
    return user


def load_owned_meeting(db: Session, user: CurrentUser, meeting_id: str) -> Meeting:
    """Fetch a meeting by id *and* owner, or raise NotFound."""
    meeting = db.scalars(
        select(Meeting).where(Meeting.id == meeting_id, Meeting.user_id == user.id).limit(1)
    ).first()
    if meeting is None:
        logger.info("meeting not found for user", extra={"meeting_id": meeting_id, "user_id": user.id})
        raise NotFound(MEETING_NOT_FOUND)
    return meeting


def _new_id() -> str:
    return str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Meetings
# ---------------------------------------------------------------------------


def create_meeting(db: Session, user: Optional[CurrentUser], payload: MeetingCreate) -> Meeting:
    user = require_user(user)
    now = utcnow()
    meeting_id = payload.id or _new_id()
    meeting = Meeting(
        id=meeting_id,
        user_id=user.id,
        title=payload.title,
        source_type=payload.source_type,
        source_url=payload.source_url,
        scheduled_at=payload.scheduled_at,
        duration_minutes=payload.duration_minutes,
        created_at=now,
        updated_at=now,
    )
    db.add(meeting)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("meeting id already taken", extra={"meeting_id": meeting_id, "user_id": user.id})
        raise Conflict(MEETING_ID_TAKEN)
    db.refresh(meeting)
    logger.info("meeting created", extra={"meeting_id": meeting.id, "user_id": user.id})
    return meeting


def update_meeting(db: Session, user: Optional[CurrentUser], payload: MeetingUpdate) -> Meeting:
    """Patch only the fields the caller actually sent."""
    user = require_user(user)
    meeting = load_owned_meeting(db, user, payload.id)

    changes = payload.model_dump(exclude={"id"}, exclude_unset=True, exclude_none=True)
    if not changes:
        return meeting

    for field, value in changes.items():
        setattr(meeting, field, value)
    meeting.updated_at = utcnow()

    db.add(meeting)
    db.commit()
    db.refresh(meeting)
    logger.info(
        "meeting updated",
        extra={"meeting_id": meeting.id, "user_id": user.id, "fields": sorted(changes)},
    )
    return meeting


def list_meetings(db: Session, user: Optional[CurrentUser]) -> List[Meeting]:
    user = require_user(user)
    stmt = (
        select(Meeting)
        .where(Meeting.user_id == user.id)
        .order_by(Meeting.created_at.asc(), Meeting.id.asc())
    )
    return list(db.scalars(stmt).all())


def delete_meeting(db: Session, user: Optional[CurrentUser], payload: MeetingRef) -> Meeting:
    """Delete an owned meeting; its sections and action items go with it."""
    user = require_user(user)
    meeting = load_owned_meeting(db, user, payload.id)
    db.delete(meeting)
    db.commit()
    logger.info("meeting deleted", extra={"meeting_id": meeting.id, "user_id": user.id})
    return meeting


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


def save_section(db: Session, user: Optional[CurrentUser], payload: SectionSave) -> MeetingSection:
    user = require_user(user)
    load_owned_meeting(db, user, payload.meeting_id)

    if payload.id:
        section = db.get(MeetingSection, payload.id)
        if section is None or section.meeting_id != payload.meeting_id:
            raise NotFound(SECTION_NOT_FOUND)
        section.type = payload.type
        section.order_index = payload.order_index
        section.content = payload.content
        section.created_at = utcnow()
        event = "section replaced"
    else:
        section = MeetingSection(
            id=_new_id(),
            meeting_id=payload.meeting_id,
            type=payload.type,
            order_index=payload.order_index,
            content=payload.content,
            created_at=utcnow(),
        )
        event = "section created"

    db.add(section)
    db.commit()
    db.refresh(section)
    logger.info(event, extra={"section_id": section.id, "meeting_id": section.meeting_id, "user_id": user.id})
    return section


def delete_section(db: Session, user: Optional[CurrentUser], payload: SectionRef) -> MeetingSection:
    user = require_user(user)
    load_owned_meeting(db, user, payload.meeting_id)

    section = db.scalars(
        select(MeetingSection)
        .where(MeetingSection.id == payload.id, MeetingSection.meeting_id == payload.meeting_id)
        .limit(1)
    ).first()
    if section is None:
        raise NotFound(SECTION_NOT_FOUND)

    db.delete(section)
    db.commit()
    logger.info(
        "section deleted",
        extra={"section_id": section.id, "meeting_id": section.meeting_id, "user_id": user.id},
    )
    return section


# ---------------------------------------------------------------------------
# Action items
# ---------------------------------------------------------------------------


def save_action_item(db: Session, user: Optional[CurrentUser], payload: ActionItemSave) -> ActionItem:
    """
    Insert a new action item, or overwrite an existing one wholesale.

    On overwrite, optional fields left out of the payload are cleared and
    both timestamps are reset.
    """
    user = require_user(user)
    load_owned_meeting(db, user, payload.meeting_id)

    now = utcnow()
    values = {
        "meeting_id": payload.meeting_id,
        "assignee": payload.assignee,
        "description": payload.description,
        "due_date": payload.due_date,
        "status": payload.status,
        "created_at": now,
        "updated_at": now,
    }

    if payload.id:
        item = db.get(ActionItem, payload.id)
        if item is None or item.meeting_id != payload.meeting_id:
            raise NotFound(ACTION_ITEM_NOT_FOUND)
        for field, value in values.items():
            setattr(item, field, value)
        event = "action item replaced"
    else:
        item = ActionItem(id=_new_id(), **values)
        event = "action item created"

    db.add(item)
    db.commit()
    db.refresh(item)
    logger.info(event, extra={"item_id": item.id, "meeting_id": item.meeting_id, "user_id": user.id})
    return item


def list_action_items(
    db: Session,
    user: Optional[CurrentUser],
    payload: Optional[ActionItemFilter] = None,
) -> List[ActionItem]:
    user = require_user(user)
    requested = payload.meeting_id if payload is not None else None

    owned_ids = set(db.scalars(select(Meeting.id).where(Meeting.user_id == user.id)).all())
    if requested and requested not in owned_ids:
        logger.info("meeting not found for user", extra={"meeting_id": requested, "user_id": user.id})
        raise NotFound(MEETING_NOT_FOUND)

    wanted = {requested} if requested else owned_ids
    if not wanted:
        return []

    stmt = (
        select(ActionItem)
        .where(ActionItem.meeting_id.in_(wanted))
        .order_by(ActionItem.created_at.asc(), ActionItem.id.asc())
    )
    return list(db.scalars(stmt).all())
