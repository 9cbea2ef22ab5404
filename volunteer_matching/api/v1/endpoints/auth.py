"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Tue Jul 08 2025
# SPDX-License-Identifier: MIT
"""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from volunteer_matching.config import settings
from volunteer_matching.crud import crud_volunteer
from volunteer_matching.db.database import get_db
from volunteer_matching.dependencies import create_access_token
from volunteer_matching.schemas import schemas
from volunteer_matching.utils.security import verify_password

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Authentication"],
    responses={404: {"description": "Not found"}},
)


@router.post("/register", response_model=schemas.Volunteer, status_code=status.HTTP_201_CREATED)
def register_volunteer(volunteer: schemas.VolunteerCreate, db: Session = Depends(get_db)):
    """
    Registers a new volunteer account. The profile is completed separately.
    """
    if crud_volunteer.get_volunteer_by_email(db, email=volunteer.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")

    db_volunteer = crud_volunteer.create_volunteer(db, volunteer)
    if db_volunteer is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")
    logger.info(f"Registered volunteer {db_volunteer.id}")
    return db_volunteer


@router.post("/login", response_model=schemas.Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)
):
    """
    Authenticates a volunteer and returns an access token.
    """
    volunteer = crud_volunteer.get_volunteer_by_email(db, email=form_data.username)
    if not volunteer or not verify_password(form_data.password, volunteer.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not volunteer.is_active:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Inactive volunteer")

    access_token_expires = timedelta(minutes=settings.access_token_expire_minutes)
    access_token = create_access_token(data={"sub": volunteer.email}, expires_delta=access_token_expires)
    return {"access_token": access_token, "token_type": "bearer"}
