# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import datetime
from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from volunteer_matching.services.scoring import parse_list

MatchStatus = Literal["pending", "assigned", "completed", "cancelled"]
Urgency = Literal["low", "medium", "high"]


class Token(BaseModel):
    access_token: str
    token_type: str


class TokenData(BaseModel):
    email: Optional[str] = None


# --- Volunteer Schemas ---
class VolunteerCreate(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class ProfileUpdate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    city: Optional[str] = None
    state_code: Optional[str] = Field(default=None, max_length=10)
    skills: Optional[List[str]] = None
    availability: Optional[List[date]] = None
    preferences: Optional[List[str]] = None

    @field_validator("skills", "preferences")
    @classmethod
    def strip_labels(cls, value):
        # Labels are stored comma-delimited
        if value is None:
            return value
        if any("," in label for label in value):
            raise ValueError("labels must not contain commas")
        return [label.strip() for label in value if label.strip()]


class Volunteer(BaseModel):
    id: int
    email: EmailStr
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    city: Optional[str] = None
    state_code: Optional[str] = None
    skills: List[str] = []
    availability: List[str] = []
    preferences: List[str] = []
    completed: bool
    is_active: bool
    is_manager: bool

    model_config = ConfigDict(from_attributes=True)

    @field_validator("skills", "availability", "preferences", mode="before")
    @classmethod
    def split_stored_list(cls, value):
        return parse_list(value)


# --- Event Schemas ---
class EventBase(BaseModel):
    name: str
    description: Optional[str] = None
    location: Optional[str] = None
    required_skills: List[str] = []
    urgency: Urgency = "low"
    event_date: date
    max_volunteers: int = Field(ge=0)


class EventCreate(EventBase):
    pass


class EventUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    required_skills: Optional[List[str]] = None
    urgency: Optional[Urgency] = None
    event_date: Optional[date] = None
    max_volunteers: Optional[int] = Field(default=None, ge=0)


class Event(EventBase):
    id: int
    current_volunteers: int

    model_config = ConfigDict(from_attributes=True)

    @field_validator("required_skills", mode="before")
    @classmethod
    def split_stored_list(cls, value):
        return parse_list(value)


# --- Matching Schemas ---
class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class AssignmentCreate(CamelModel):
    volunteer_id: int = Field(strict=True, gt=0)
    event_id: int = Field(strict=True, gt=0)
    notes: Optional[str] = Field(default=None, strict=True)


class MatchStatusUpdate(CamelModel):
    status: MatchStatus


class MatchCandidate(CamelModel):
    volunteer: Volunteer
    event: Event
    match_score: int


class VolunteerSummary(CamelModel):
    id: int
    name: str
    email: str
    skills: List[str] = []


class EventSummary(CamelModel):
    id: int
    name: str
    date: datetime.date
    location: Optional[str] = None


class HistoryEventSummary(EventSummary):
    description: Optional[str] = None


class Match(CamelModel):
    id: int
    event_id: Optional[int] = None
    volunteer_id: int
    match_score: int
    status: MatchStatus
    assigned_date: date
    notes: str = ""


class MatchWithDetails(Match):
    volunteer: Optional[VolunteerSummary] = None
    event: Optional[EventSummary] = None


class VolunteerHistoryEntry(Match):
    event: Optional[HistoryEventSummary] = None
