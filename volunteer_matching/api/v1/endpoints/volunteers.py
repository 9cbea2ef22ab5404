# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from volunteer_matching.crud import crud_volunteer
from volunteer_matching.db.database import get_db
from volunteer_matching.db.models import Volunteer
from volunteer_matching.dependencies import get_current_active_volunteer, get_current_manager, require_self_or_manager
from volunteer_matching.schemas import schemas

router = APIRouter(
    prefix="/volunteers",
    tags=["Volunteers"],
    responses={404: {"description": "Not found"}},
)


@router.get("/", response_model=List[schemas.Volunteer])
def read_volunteers(
    skip: int = 0,
    limit: int = 100,
    current_manager: Volunteer = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    """
    Retrieves a list of all volunteer profiles. (Manager access required)
    """
    return crud_volunteer.get_volunteers(db, skip=skip, limit=limit)


@router.get("/me", response_model=schemas.Volunteer)
def read_volunteers_me(current_volunteer: Volunteer = Depends(get_current_active_volunteer)):
    """
    Retrieves the current authenticated volunteer's profile.
    """
    return current_volunteer


@router.get("/{volunteer_id}", response_model=schemas.Volunteer)
def read_volunteer(
    volunteer_id: int,
    current_manager: Volunteer = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    """
    Retrieves a single volunteer profile by ID. (Manager access required)
    """
    db_volunteer = crud_volunteer.get_volunteer(db, volunteer_id=volunteer_id)
    if db_volunteer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Volunteer not found")
    return db_volunteer


@router.put("/{volunteer_id}", response_model=schemas.Volunteer)
def update_volunteer_profile(
    volunteer_id: int,
    profile: schemas.ProfileUpdate,
    current_volunteer: Volunteer = Depends(get_current_active_volunteer),
    db: Session = Depends(get_db),
):
    """
    Updates a volunteer profile. Only the owner can update their profile.
    """
    if volunteer_id != current_volunteer.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="You can only update your own volunteer profile."
        )

    db_volunteer = crud_volunteer.update_profile(db, volunteer_id, profile)
    if db_volunteer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Volunteer not found")
    return db_volunteer


@router.delete("/{volunteer_id}", response_model=schemas.Volunteer)
def deactivate_volunteer(
    volunteer_id: int,
    current_volunteer: Volunteer = Depends(get_current_active_volunteer),
    db: Session = Depends(get_db),
):
    """
    Deactivates a volunteer account. Managers can deactivate anyone, volunteers only themselves.
    """
    require_self_or_manager(volunteer_id, current_volunteer)

    db_volunteer = crud_volunteer.deactivate_volunteer(db, volunteer_id)
    if db_volunteer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Volunteer not found")
    return db_volunteer
