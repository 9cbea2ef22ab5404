# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from datetime import date, datetime, timezone

from sqlalchemy import CheckConstraint, Column, Date, DateTime, Enum, ForeignKey, Index, Integer, String, Text, text
from sqlalchemy.orm import relationship

from volunteer_matching.db.database import Base

MATCH_STATUSES = ("pending", "assigned", "completed", "cancelled")
URGENCY_LEVELS = ("low", "medium", "high")


def _utcnow():
    return datetime.now(timezone.utc)


class Volunteer(Base):
    __tablename__ = "volunteers"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    city = Column(String(100), nullable=True)
    state_code = Column(String(10), nullable=True)
    # Comma-delimited lists, normalized by services.scoring.parse_list
    skills = Column(Text, nullable=True)
    availability = Column(Text, nullable=True)
    preferences = Column(Text, nullable=True)
    completed = Column(Integer, default=0, nullable=False)
    is_active = Column(Integer, default=1, nullable=False)
    is_manager = Column(Integer, default=0, nullable=False)
    matches = relationship("VolunteerMatch", back_populates="volunteer")


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)
    required_skills = Column(Text, nullable=True)
    urgency = Column(Enum(*URGENCY_LEVELS, name="event_urgency"), nullable=False, default="low")
    event_date = Column(Date, nullable=False)
    max_volunteers = Column(Integer, nullable=False, default=0)
    current_volunteers = Column(Integer, nullable=False, default=0)
    matches = relationship("VolunteerMatch", back_populates="event")


class VolunteerMatch(Base):
    __tablename__ = "volunteer_matches"
    __table_args__ = (
        CheckConstraint("match_score >= 0 AND match_score <= 100", name="ck_volunteer_matches_score_range"),
        # At most one active (non-cancelled) match per (event, volunteer) pair
        Index(
            "uq_volunteer_matches_active_pair",
            "event_id",
            "volunteer_id",
            unique=True,
            sqlite_where=text("status != 'cancelled'"),
            postgresql_where=text("status != 'cancelled'"),
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="SET NULL"), nullable=True)
    volunteer_id = Column(Integer, ForeignKey("volunteers.id"), nullable=False)
    match_score = Column(Integer, nullable=False)
    status = Column(Enum(*MATCH_STATUSES, name="match_status"), nullable=False, default="pending")
    assigned_date = Column(Date, nullable=False, default=date.today)
    notes = Column(Text, nullable=False, default="")
    created_at = Column(DateTime, nullable=False, default=_utcnow)
    updated_at = Column(DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)
    volunteer = relationship("Volunteer", back_populates="matches")
    event = relationship("Event", back_populates="matches")
