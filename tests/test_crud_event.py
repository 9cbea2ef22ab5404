# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from datetime import date

from sqlalchemy.orm import Session

from volunteer_matching.crud import crud_event
from volunteer_matching.schemas import schemas
from tests.test_helpers import create_event


def test_create_and_get_event(db_session: Session):
    event_data = schemas.EventCreate(
        name="Food Bank Distribution",
        description="Distribute food to families in need",
        location="Downtown LA Food Bank",
        required_skills=["Food Service", "Logistics"],
        urgency="medium",
        event_date=date(2099, 1, 18),
        max_volunteers=15,
    )
    event = crud_event.create_event(db_session, event_data)

    fetched = crud_event.get_event(db_session, event.id)
    assert fetched.required_skills == "Food Service,Logistics"
    assert fetched.current_volunteers == 0
    assert crud_event.get_event(db_session, 999) is None


def test_get_events_upcoming_from(db_session: Session):
    old = create_event(db_session, name="Old", event_date=date(2020, 5, 1))
    soon = create_event(db_session, name="Soon", event_date=date(2099, 1, 1))
    later = create_event(db_session, name="Later", event_date=date(2099, 6, 1))

    assert [e.id for e in crud_event.get_events(db_session)] == [old.id, soon.id, later.id]
    assert [e.id for e in crud_event.get_events(db_session, upcoming_from=date(2099, 1, 1))] == [soon.id, later.id]


def test_update_event_leaves_unset_fields(db_session: Session):
    event = create_event(db_session)

    updated = crud_event.update_event(db_session, event.id, schemas.EventUpdate(location="Dallas, TX"))

    assert updated.location == "Dallas, TX"
    assert updated.required_skills == "First Aid,Teamwork"
    assert crud_event.update_event(db_session, 999, schemas.EventUpdate(name="x")) is None


def test_reserve_volunteer_slot_stops_at_capacity(db_session: Session):
    event = create_event(db_session, max_volunteers=2, current_volunteers=1)

    assert crud_event.reserve_volunteer_slot(db_session, event.id) is True
    assert crud_event.reserve_volunteer_slot(db_session, event.id) is False
    db_session.commit()

    assert crud_event.get_event(db_session, event.id).current_volunteers == 2


def test_reserve_volunteer_slot_unknown_event(db_session: Session):
    assert crud_event.reserve_volunteer_slot(db_session, 999) is False


def test_release_volunteer_slot_stops_at_zero(db_session: Session):
    event = create_event(db_session, current_volunteers=1)

    assert crud_event.release_volunteer_slot(db_session, event.id) is True
    assert crud_event.release_volunteer_slot(db_session, event.id) is False
    db_session.commit()

    assert crud_event.get_event(db_session, event.id).current_volunteers == 0
