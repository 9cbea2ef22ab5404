# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from datetime import date
from typing import Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from volunteer_matching.db import models
from volunteer_matching.schemas import schemas


def _skills_text(skills) -> str:
    return ",".join(skills or [])


def get_event(db: Session, event_id: int):
    return db.query(models.Event).filter(models.Event.id == event_id).first()


def get_events(db: Session, upcoming_from: Optional[date] = None, skip: int = 0, limit: int = 100):
    query = db.query(models.Event)
    if upcoming_from is not None:
        query = query.filter(models.Event.event_date >= upcoming_from)
    return query.order_by(models.Event.event_date, models.Event.id).offset(skip).limit(limit).all()


def create_event(db: Session, event: schemas.EventCreate):
    db_event = models.Event(
        name=event.name,
        description=event.description,
        location=event.location,
        required_skills=_skills_text(event.required_skills),
        urgency=event.urgency,
        event_date=event.event_date,
        max_volunteers=event.max_volunteers,
        current_volunteers=0,
    )
    db.add(db_event)
    db.commit()
    db.refresh(db_event)
    return db_event


def update_event(db: Session, event_id: int, event: schemas.EventUpdate):
    db_event = get_event(db, event_id)
    if db_event is None:
        return None
    for key, value in event.model_dump(exclude_unset=True, exclude_none=True, exclude={"required_skills"}).items():
        setattr(db_event, key, value)
    if "required_skills" in event.model_fields_set:
        db_event.required_skills = _skills_text(event.required_skills)
    db.commit()
    db.refresh(db_event)
    return db_event


def delete_event(db: Session, event_id: int):
    """
    Deletes an event. Its matches are kept with their event reference cleared.
    """
    db_event = get_event(db, event_id)
    if db_event:
        db.delete(db_event)
        db.commit()
        return True
    return False


def reserve_volunteer_slot(db: Session, event_id: int) -> bool:
    """
    Atomically increments the event's volunteer counter if it has room left.
    Does not commit; returns False when the event is already at capacity.
    """
    result = db.execute(
        update(models.Event)
        .where(
            models.Event.id == event_id,
            models.Event.current_volunteers < models.Event.max_volunteers,
        )
        .values(current_volunteers=models.Event.current_volunteers + 1)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount == 1


def release_volunteer_slot(db: Session, event_id: int) -> bool:
    """
    Atomically decrements the event's volunteer counter, never below zero.
    Does not commit.
    """
    result = db.execute(
        update(models.Event)
        .where(models.Event.id == event_id, models.Event.current_volunteers > 0)
        .values(current_volunteers=models.Event.current_volunteers - 1)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount == 1
