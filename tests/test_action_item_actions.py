from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from meeting_records.core.errors import NotFound, Unauthorized
from meeting_records.models import ActionItem
from meeting_records.schemas.action_items import ActionItemFilter, ActionItemSave
from meeting_records.schemas.meetings import MeetingCreate, MeetingRef
from meeting_records.services import actions


@pytest.fixture()
def meetings(db, alice, bob):
    actions.create_meeting(db, alice, MeetingCreate(id="a1", title="Alice planning"))
    actions.create_meeting(db, alice, MeetingCreate(id="a2", title="Alice retro"))
    actions.create_meeting(db, bob, MeetingCreate(id="b1", title="Bob sync"))


def _save(db, user, **fields):
    fields.setdefault("description", "Follow up")
    return actions.save_action_item(db, user, ActionItemSave(**fields))


def test_save_action_item_inserts(db, alice, meetings):
    due = datetime(2031, 3, 1, tzinfo=timezone.utc)
    item = _save(db, alice, meeting_id="a1", assignee="sam", due_date=due, status="open")

    assert item.id
    assert item.meeting_id == "a1"
    assert item.assignee == "sam"
    assert item.status == "open"
    assert item.due_date is not None
    assert item.created_at == item.updated_at


def test_save_action_item_with_id_replaces_every_field(db, alice, meetings):
    item = _save(db, alice, meeting_id="a1", assignee="sam", status="open")

    replaced = _save(db, alice, id=item.id, meeting_id="a1", description="Ship it")

    assert replaced.id == item.id
    assert replaced.description == "Ship it"
    # omitted optional fields are cleared, not kept
    assert replaced.assignee is None
    assert replaced.status is None
    assert db.query(ActionItem).count() == 1


def test_save_action_item_unknown_id_is_not_found(db, alice, meetings):
    with pytest.raises(NotFound) as exc:
        _save(db, alice, id="missing", meeting_id="a1")
    assert exc.value.message == "Action item not found."


def test_save_action_item_id_from_another_meeting_is_not_found(db, alice, meetings):
    item = _save(db, alice, meeting_id="a2")

    with pytest.raises(NotFound):
        _save(db, alice, id=item.id, meeting_id="a1")


def test_save_action_item_on_foreign_meeting_is_not_found(db, alice, meetings):
    with pytest.raises(NotFound) as exc:
        _save(db, alice, meeting_id="b1")
    assert exc.value.message == "Meeting not found."
    assert db.query(ActionItem).count() == 0


def test_save_action_item_requires_user(db, meetings):
    with pytest.raises(Unauthorized):
        _save(db, None, meeting_id="a1")


def test_list_action_items_is_union_of_owned_meetings(db, alice, bob, meetings):
    i1 = _save(db, alice, meeting_id="a1", description="one")
    i2 = _save(db, alice, meeting_id="a2", description="two")
    _save(db, bob, meeting_id="b1", description="bob's")

    items = actions.list_action_items(db, alice)

    assert {i.id for i in items} == {i1.id, i2.id}


def test_list_action_items_filtered_by_meeting(db, alice, meetings):
    i1 = _save(db, alice, meeting_id="a1")
    _save(db, alice, meeting_id="a2")

    items = actions.list_action_items(db, alice, ActionItemFilter(meeting_id="a1"))

    assert [i.id for i in items] == [i1.id]


def test_list_action_items_for_foreign_meeting_is_not_found(db, alice, bob, meetings):
    _save(db, bob, meeting_id="b1")

    with pytest.raises(NotFound):
        actions.list_action_items(db, alice, ActionItemFilter(meeting_id="b1"))


def test_list_action_items_without_meetings_is_empty(db, alice):
    assert actions.list_action_items(db, alice) == []
    assert actions.list_action_items(db, alice, ActionItemFilter()) == []


def test_list_action_items_requires_user(db):
    with pytest.raises(Unauthorized):
        actions.list_action_items(db, None)


def test_deleting_meeting_removes_its_action_items(db, alice, meetings):
    _save(db, alice, meeting_id="a1")
    kept = _save(db, alice, meeting_id="a2")

    actions.delete_meeting(db, alice, MeetingRef(id="a1"))

    assert [i.id for i in actions.list_action_items(db, alice)] == [kept.id]
    assert db.query(ActionItem).count() == 1


@pytest.mark.parametrize(
    "fields",
    [
        {"meeting_id": "a1", "description": ""},
        {"meeting_id": "a1"},
        {"description": "Follow up"},
    ],
)
def test_save_action_item_validation(fields):
    with pytest.raises(ValidationError):
        ActionItemSave(**fields)


def test_due_date_offset_is_kept_as_utc(db, alice, meetings):
    due = datetime(2031, 6, 1, 18, 30, tzinfo=timezone(timedelta(hours=-5)))

    item = _save(db, alice, meeting_id="a1", due_date=due)

    assert item.due_date == datetime(2031, 6, 1, 23, 30, tzinfo=timezone.utc)
    assert item.due_date.tzinfo == timezone.utc
