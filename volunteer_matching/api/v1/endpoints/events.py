# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from volunteer_matching.crud import crud_event
from volunteer_matching.db.database import get_db
from volunteer_matching.db.models import Volunteer
from volunteer_matching.dependencies import get_current_active_volunteer, get_current_manager
from volunteer_matching.schemas import schemas

router = APIRouter(
    prefix="/events",
    tags=["Events"],
    responses={404: {"description": "Not found"}},
)


@router.post("/", response_model=schemas.Event, status_code=status.HTTP_201_CREATED)
def create_event(
    event: schemas.EventCreate,
    current_manager: Volunteer = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    """
    Creates a new event. (Manager access required)
    """
    return crud_event.create_event(db, event)


@router.get("/", response_model=List[schemas.Event])
def read_events(
    upcoming_only: bool = False,
    skip: int = 0,
    limit: int = 100,
    current_volunteer: Volunteer = Depends(get_current_active_volunteer),
    db: Session = Depends(get_db),
):
    """
    Lists events by date. With upcoming_only, events dated before today are left out.
    """
    upcoming_from = date.today() if upcoming_only else None
    return crud_event.get_events(db, upcoming_from=upcoming_from, skip=skip, limit=limit)


@router.get("/{event_id}", response_model=schemas.Event)
def read_event(
    event_id: int,
    current_volunteer: Volunteer = Depends(get_current_active_volunteer),
    db: Session = Depends(get_db),
):
    db_event = crud_event.get_event(db, event_id)
    if db_event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return db_event


@router.put("/{event_id}", response_model=schemas.Event)
def update_event(
    event_id: int,
    event: schemas.EventUpdate,
    current_manager: Volunteer = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    """
    Updates an existing event. (Manager access required)
    """
    db_event = crud_event.update_event(db, event_id, event)
    if db_event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return db_event


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(
    event_id: int,
    current_manager: Volunteer = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    """
    Deletes an event. Existing matches keep their history without the event. (Manager access required)
    """
    if not crud_event.delete_event(db, event_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
