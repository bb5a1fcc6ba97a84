from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from meeting_records.deps import get_current_user, get_db, require_api_key
from meeting_records.schemas.action_items import (
    ActionItemFilter,
    ActionItemList,
    ActionItemRead,
    ActionItemResult,
    ActionItemSave,
)
from meeting_records.schemas.meetings import (
    MeetingCreate,
    MeetingList,
    MeetingRead,
    MeetingRef,
    MeetingResult,
    MeetingUpdate,
)
from meeting_records.schemas.sections import SectionRead, SectionRef, SectionResult, SectionSave
from meeting_records.schemas.users import CurrentUser
from meeting_records.services import actions

router = APIRouter(
    prefix="/v1/actions",
    tags=["actions"],
    dependencies=[Depends(require_api_key)],
)


# ---------------------------------------------------------------------------
# Meetings
# ---------------------------------------------------------------------------


@router.post("/create_meeting", response_model=MeetingResult)
def create_meeting(
    payload: MeetingCreate,
    db: Session = Depends(get_db),
    user: Optional[CurrentUser] = Depends(get_current_user),
):
    meeting = actions.create_meeting(db, user, payload)
    return MeetingResult(meeting=MeetingRead.model_validate(meeting))


@router.post("/update_meeting", response_model=MeetingResult)
def update_meeting(
    payload: MeetingUpdate,
    db: Session = Depends(get_db),
    user: Optional[CurrentUser] = Depends(get_current_user),
):
    meeting = actions.update_meeting(db, user, payload)
    return MeetingResult(meeting=MeetingRead.model_validate(meeting))


@router.post("/list_meetings", response_model=MeetingList)
def list_meetings(
    db: Session = Depends(get_db),
    user: Optional[CurrentUser] = Depends(get_current_user),
):
    meetings = actions.list_meetings(db, user)
    return MeetingList(meetings=[MeetingRead.model_validate(m) for m in meetings])


@router.post("/delete_meeting", response_model=MeetingResult)
def delete_meeting(
    payload: MeetingRef,
    db: Session = Depends(get_db),
    user: Optional[CurrentUser] = Depends(get_current_user),
):
    meeting = actions.delete_meeting(db, user, payload)
    return MeetingResult(meeting=MeetingRead.model_validate(meeting))


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


@router.post("/save_section", response_model=SectionResult)
def save_section(
    payload: SectionSave,
    db: Session = Depends(get_db),
    user: Optional[CurrentUser] = Depends(get_current_user),
):
    section = actions.save_section(db, user, payload)
    return SectionResult(section=SectionRead.model_validate(section))


@router.post("/delete_section", response_model=SectionResult)
def delete_section(
    payload: SectionRef,
    db: Session = Depends(get_db),
    user: Optional[CurrentUser] = Depends(get_current_user),
):
    section = actions.delete_section(db, user, payload)
    return SectionResult(section=SectionRead.model_validate(section))


# ---------------------------------------------------------------------------
# Action items
# ---------------------------------------------------------------------------


@router.post("/save_action_item", response_model=ActionItemResult)
def save_action_item(
    payload: ActionItemSave,
    db: Session = Depends(get_db),
    user: Optional[CurrentUser] = Depends(get_current_user),
):
    item = actions.save_action_item(db, user, payload)
    return ActionItemResult(item=ActionItemRead.model_validate(item))


@router.post("/list_action_items", response_model=ActionItemList)
def list_action_items(
    payload: Optional[ActionItemFilter] = Body(default=None),
    db: Session = Depends(get_db),
    user: Optional[CurrentUser] = Depends(get_current_user),
):
    items = actions.list_action_items(db, user, payload)
    return ActionItemList(action_items=[ActionItemRead.model_validate(i) for i in items])
