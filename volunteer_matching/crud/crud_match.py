"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Tue Jul 15 2025
# SPDX-License-Identifier: MIT
"""

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from volunteer_matching.db import models


def get_match(db: Session, match_id: int):
    return db.query(models.VolunteerMatch).filter(models.VolunteerMatch.id == match_id).first()


def get_matches(db: Session, volunteer_id: Optional[int] = None, event_id: Optional[int] = None):
    """
    Retrieves match records, newest assignments first, optionally filtered by volunteer and/or event.
    """
    query = db.query(models.VolunteerMatch)
    if volunteer_id is not None:
        query = query.filter(models.VolunteerMatch.volunteer_id == volunteer_id)
    if event_id is not None:
        query = query.filter(models.VolunteerMatch.event_id == event_id)
    return query.order_by(
        models.VolunteerMatch.assigned_date.desc(),
        models.VolunteerMatch.match_score.desc(),
        models.VolunteerMatch.id,
    ).all()


def get_active_match(db: Session, volunteer_id: int, event_id: int, exclude_id: Optional[int] = None):
    """
    Returns the non-cancelled match linking the volunteer to the event, if any.
    """
    query = db.query(models.VolunteerMatch).filter(
        models.VolunteerMatch.volunteer_id == volunteer_id,
        models.VolunteerMatch.event_id == event_id,
        models.VolunteerMatch.status != "cancelled",
    )
    if exclude_id is not None:
        query = query.filter(models.VolunteerMatch.id != exclude_id)
    return query.first()


def insert_match(
    db: Session,
    volunteer_id: int,
    event_id: int,
    match_score: int,
    status: str = "assigned",
    notes: str = "",
):
    """
    Adds a match record and flushes it so that store constraints are checked.
    The caller owns the transaction.
    """
    db_match = models.VolunteerMatch(
        volunteer_id=volunteer_id,
        event_id=event_id,
        match_score=match_score,
        status=status,
        assigned_date=date.today(),
        notes=notes,
    )
    db.add(db_match)
    db.flush()
    return db_match


def update_match_status(db: Session, match_id: int, status: str):
    """
    Overwrites the status of a match. Returns None when the match does not exist.
    The caller owns the transaction.
    """
    db_match = get_match(db, match_id)
    if db_match is None:
        return None
    db_match.status = status
    db.flush()
    return db_match
