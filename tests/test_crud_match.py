'''
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
'''

from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from volunteer_matching.crud import crud_match
from tests.test_helpers import create_event, create_volunteer


def test_insert_match_defaults(db_session: Session):
    volunteer = create_volunteer(db_session)
    event = create_event(db_session)

    match = crud_match.insert_match(db_session, volunteer.id, event.id, match_score=80)
    db_session.commit()

    assert match.status == "assigned"
    assert match.notes == ""
    assert match.assigned_date == date.today()
    assert match.created_at is not None


def test_insert_duplicate_active_match_violates_unique_index(db_session: Session):
    volunteer = create_volunteer(db_session)
    event = create_event(db_session)
    crud_match.insert_match(db_session, volunteer.id, event.id, match_score=80)
    db_session.commit()

    with pytest.raises(IntegrityError):
        crud_match.insert_match(db_session, volunteer.id, event.id, match_score=80, status="pending")
    db_session.rollback()


def test_cancelled_matches_do_not_block_new_ones(db_session: Session):
    volunteer = create_volunteer(db_session)
    event = create_event(db_session)
    crud_match.insert_match(db_session, volunteer.id, event.id, match_score=80, status="cancelled")
    crud_match.insert_match(db_session, volunteer.id, event.id, match_score=80, status="cancelled")
    active = crud_match.insert_match(db_session, volunteer.id, event.id, match_score=80)
    db_session.commit()

    assert crud_match.get_active_match(db_session, volunteer.id, event.id).id == active.id
    assert crud_match.get_active_match(db_session, volunteer.id, event.id, exclude_id=active.id) is None
    assert len(crud_match.get_matches(db_session, volunteer_id=volunteer.id)) == 3


def test_get_matches_filters(db_session: Session):
    first = create_volunteer(db_session, email="first@example.com")
    second = create_volunteer(db_session, email="second@example.com")
    event = create_event(db_session)
    other_event = create_event(db_session, name="Other")
    crud_match.insert_match(db_session, first.id, event.id, match_score=70)
    crud_match.insert_match(db_session, first.id, other_event.id, match_score=90)
    crud_match.insert_match(db_session, second.id, event.id, match_score=60)
    db_session.commit()

    assert [m.match_score for m in crud_match.get_matches(db_session)] == [90, 70, 60]
    assert len(crud_match.get_matches(db_session, volunteer_id=first.id)) == 2
    assert len(crud_match.get_matches(db_session, event_id=event.id)) == 2
    assert len(crud_match.get_matches(db_session, volunteer_id=second.id, event_id=other_event.id)) == 0


def test_update_match_status(db_session: Session):
    volunteer = create_volunteer(db_session)
    event = create_event(db_session)
    match = crud_match.insert_match(db_session, volunteer.id, event.id, match_score=80)
    db_session.commit()

    assert crud_match.update_match_status(db_session, match.id, "completed").status == "completed"
    assert crud_match.update_match_status(db_session, 999, "completed") is None
