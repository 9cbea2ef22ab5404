# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from volunteer_matching.db import models
from volunteer_matching.schemas import schemas
from volunteer_matching.utils.security import get_password_hash


def _join(values) -> str:
    return ",".join(str(value) for value in values)


def get_volunteer(db: Session, volunteer_id: int):
    return (
        db.query(models.Volunteer).filter(models.Volunteer.id == volunteer_id).first()
    )


def get_volunteer_by_email(db: Session, email: str):
    return db.query(models.Volunteer).filter(models.Volunteer.email == email).first()


def get_volunteers(db: Session, skip: int = 0, limit: int = 100):
    return db.query(models.Volunteer).order_by(models.Volunteer.id).offset(skip).limit(limit).all()


def get_matchable_volunteers(db: Session):
    """
    Active, non-manager volunteers whose profile is completed.
    """
    return (
        db.query(models.Volunteer)
        .filter(
            models.Volunteer.is_active == 1,
            models.Volunteer.is_manager == 0,
            models.Volunteer.completed == 1,
        )
        .order_by(models.Volunteer.id)
        .all()
    )


def create_volunteer(db: Session, volunteer: schemas.VolunteerCreate):
    db_volunteer = models.Volunteer(
        email=volunteer.email,
        password=get_password_hash(volunteer.password),
        first_name=volunteer.first_name,
        last_name=volunteer.last_name,
        completed=0,
        is_active=1,
        is_manager=0,
    )
    try:
        db.add(db_volunteer)
        db.commit()
        db.refresh(db_volunteer)
        return db_volunteer
    except IntegrityError:
        db.rollback()
        return None  # Indicate that creation failed, likely due to duplicate email


def update_profile(db: Session, volunteer_id: int, profile: schemas.ProfileUpdate):
    db_volunteer = get_volunteer(db, volunteer_id)
    if db_volunteer is None:
        return None

    update_data = profile.model_dump(exclude_unset=True, exclude={"skills", "availability", "preferences"})
    for key, value in update_data.items():
        setattr(db_volunteer, key, value)

    if profile.skills is not None:
        db_volunteer.skills = _join(profile.skills)
    if profile.availability is not None:
        db_volunteer.availability = _join(d.isoformat() for d in profile.availability)
    if profile.preferences is not None:
        db_volunteer.preferences = _join(profile.preferences)

    # Completed once the profile carries the data matching needs
    db_volunteer.completed = int(bool(db_volunteer.skills) and bool(db_volunteer.availability))

    db.commit()
    db.refresh(db_volunteer)
    return db_volunteer


def deactivate_volunteer(db: Session, volunteer_id: int):
    db_volunteer = get_volunteer(db, volunteer_id)
    if db_volunteer is None:
        return None
    db_volunteer.is_active = 0
    db.commit()
    db.refresh(db_volunteer)
    return db_volunteer
