"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Tue Jul 15 2025
# SPDX-License-Identifier: MIT
"""

import logging

from sqlalchemy.orm import Session

from volunteer_matching.crud import crud_match
from volunteer_matching.db.database import get_db
from volunteer_matching.services.email_service import EmailService

logger = logging.getLogger(__name__)


def _load(db: Session, match_id: int):
    match = crud_match.get_match(db, match_id)
    if match is None:
        logger.warning(f"Background Task Warning: Match with ID {match_id} not found for notification.")
        return None
    if match.volunteer is None or match.event is None:
        logger.warning(f"Background Task Warning: Match {match_id} has no volunteer or event, skipping notification.")
        return None
    return match


async def notify_assignment(match_id: int):
    """
    Emails the volunteer about a new assignment.
    This function is designed to run as a background task.
    """
    db: Session = next(get_db())
    try:
        match = _load(db, match_id)
        if match:
            await EmailService().send_assignment_notification(match.volunteer, match.event, match)
    finally:
        db.close()


async def notify_status_change(match_id: int):
    """
    Emails the volunteer about a match status change.
    This function is designed to run as a background task.
    """
    db: Session = next(get_db())
    try:
        match = _load(db, match_id)
        if match:
            await EmailService().send_status_update_notification(match.volunteer, match.event, match)
    finally:
        db.close()
