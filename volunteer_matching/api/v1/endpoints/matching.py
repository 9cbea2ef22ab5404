"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
"""

from typing import List

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from sqlalchemy.orm import Session

from volunteer_matching.db.database import get_db
from volunteer_matching.db.models import Volunteer
from volunteer_matching.dependencies import get_current_active_volunteer, get_current_manager, require_self_or_manager
from volunteer_matching.events import match_handlers
from volunteer_matching.crud import crud_match
from volunteer_matching.schemas import schemas
from volunteer_matching.services.matching_service import MatchingService

router = APIRouter(
    prefix="/matching",
    tags=["Matching"],
    responses={404: {"description": "Not found"}},
)


@router.get("/event/{event_id}", response_model=List[schemas.MatchCandidate])
def read_matches_for_event(
    event_id: int,
    current_manager: Volunteer = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    """
    Ranked volunteer candidates for an event. (Manager access required)
    """
    return MatchingService(db).find_matches_for_event(event_id)


@router.get("/volunteer/{volunteer_id}", response_model=List[schemas.MatchCandidate])
def read_matches_for_volunteer(
    volunteer_id: int,
    current_volunteer: Volunteer = Depends(get_current_active_volunteer),
    db: Session = Depends(get_db),
):
    """
    Ranked upcoming events for a volunteer. Volunteers can only query themselves.
    """
    require_self_or_manager(volunteer_id, current_volunteer)
    return MatchingService(db).find_matches_for_volunteer(volunteer_id)


@router.get("/all", response_model=List[schemas.MatchWithDetails])
def read_all_matches(
    current_manager: Volunteer = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    """
    Every assignment with volunteer and event summaries. (Manager access required)
    """
    return MatchingService(db).get_all_matches()


@router.post("/assign", response_model=schemas.Match, status_code=status.HTTP_201_CREATED)
def assign_volunteer(
    assignment: schemas.AssignmentCreate,
    background_tasks: BackgroundTasks,
    current_manager: Volunteer = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    """
    Assigns a volunteer to an event. (Manager access required)
    """
    match = MatchingService(db).assign_volunteer_to_event(
        assignment.volunteer_id, assignment.event_id, assignment.notes or ""
    )
    background_tasks.add_task(match_handlers.notify_assignment, match.id)
    return match


@router.put("/{match_id}/status", response_model=schemas.Match)
def update_match_status(
    match_id: int,
    status_update: schemas.MatchStatusUpdate,
    background_tasks: BackgroundTasks,
    current_volunteer: Volunteer = Depends(get_current_active_volunteer),
    db: Session = Depends(get_db),
):
    """
    Changes a match's status. Managers can update any match, volunteers only their own.
    """
    if not current_volunteer.is_manager:
        db_match = crud_match.get_match(db, match_id)
        if db_match is not None and db_match.volunteer_id != current_volunteer.id:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")

    match = MatchingService(db).update_match_status(match_id, status_update.status)
    background_tasks.add_task(match_handlers.notify_status_change, match.id)
    return match


@router.get("/history/{volunteer_id}", response_model=List[schemas.VolunteerHistoryEntry])
def read_volunteer_history(
    volunteer_id: int,
    current_volunteer: Volunteer = Depends(get_current_active_volunteer),
    db: Session = Depends(get_db),
):
    """
    A volunteer's assignments, newest first. Volunteers can only read their own history.
    """
    require_self_or_manager(volunteer_id, current_volunteer)
    return MatchingService(db).get_volunteer_history(volunteer_id)


@router.post("/generate/{event_id}", response_model=List[schemas.MatchCandidate])
def generate_matches_for_event(
    event_id: int,
    current_manager: Volunteer = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    """
    Computes candidates for an event without assigning anyone. (Manager access required)
    """
    return MatchingService(db).find_matches_for_event(event_id)
