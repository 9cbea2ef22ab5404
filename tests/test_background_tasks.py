# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import logging

import pytest
from sqlalchemy.orm import Session

from volunteer_matching.crud import crud_event
from volunteer_matching.events import match_handlers
from volunteer_matching.services.matching_service import MatchingService
from tests.test_helpers import create_event, create_volunteer


@pytest.fixture(name="email_service")
def email_service_fixture(db_session: Session, mocker):
    mocker.patch("volunteer_matching.events.match_handlers.get_db", return_value=iter([db_session]))
    email_service_class = mocker.patch("volunteer_matching.events.match_handlers.EmailService")
    email_service = email_service_class.return_value
    email_service.send_assignment_notification = mocker.AsyncMock()
    email_service.send_status_update_notification = mocker.AsyncMock()
    return email_service


@pytest.mark.asyncio
async def test_notify_assignment_sends_email(db_session: Session, email_service):
    volunteer = create_volunteer(db_session)
    event = create_event(db_session)
    match = MatchingService(db_session).assign_volunteer_to_event(volunteer.id, event.id)
    match_id, volunteer_email = match.id, volunteer.email

    await match_handlers.notify_assignment(match_id)

    email_service.send_assignment_notification.assert_awaited_once()
    sent_volunteer, sent_event, sent_match = email_service.send_assignment_notification.await_args.args
    assert sent_volunteer.email == volunteer_email
    assert sent_event.name == "Shelter Support"
    assert sent_match.id == match_id


@pytest.mark.asyncio
async def test_notify_status_change_sends_email(db_session: Session, email_service):
    volunteer = create_volunteer(db_session)
    event = create_event(db_session)
    service = MatchingService(db_session)
    match = service.assign_volunteer_to_event(volunteer.id, event.id)
    service.update_match_status(match.id, "completed")

    await match_handlers.notify_status_change(match.id)

    email_service.send_status_update_notification.assert_awaited_once()


@pytest.mark.asyncio
async def test_notify_assignment_match_not_found(db_session: Session, email_service, caplog):
    with caplog.at_level(logging.WARNING):
        await match_handlers.notify_assignment(99999)

    assert "Match with ID 99999 not found for notification" in caplog.text
    email_service.send_assignment_notification.assert_not_called()


@pytest.mark.asyncio
async def test_notify_skips_match_without_event(db_session: Session, email_service, caplog):
    volunteer = create_volunteer(db_session)
    event = create_event(db_session)
    match = MatchingService(db_session).assign_volunteer_to_event(volunteer.id, event.id)
    match_id = match.id
    crud_event.delete_event(db_session, event.id)

    with caplog.at_level(logging.WARNING):
        await match_handlers.notify_status_change(match_id)

    assert f"Match {match_id} has no volunteer or event" in caplog.text
    email_service.send_status_update_notification.assert_not_called()
