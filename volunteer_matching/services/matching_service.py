"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Wed Jul 09 2025
# SPDX-License-Identifier: MIT
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from volunteer_matching.crud import crud_event, crud_match, crud_volunteer
from volunteer_matching.db import models
from volunteer_matching.exceptions import (
    AlreadyAssignedError,
    EventFullError,
    MatchNotFoundError,
    VolunteerOrEventNotFoundError,
)
from volunteer_matching.services.scoring import parse_list, score

logger = logging.getLogger(__name__)

# Pairs scoring below this are never surfaced as candidates
ADMISSION_THRESHOLD = 50


def display_name(volunteer: models.Volunteer) -> str:
    name = f"{volunteer.first_name or ''} {volunteer.last_name or ''}".strip()
    return name or volunteer.email


def _match_record(match: models.VolunteerMatch) -> Dict[str, Any]:
    return {
        "id": match.id,
        "event_id": match.event_id,
        "volunteer_id": match.volunteer_id,
        "match_score": match.match_score,
        "status": match.status,
        "assigned_date": match.assigned_date,
        "notes": match.notes or "",
    }


def _volunteer_summary(volunteer: Optional[models.Volunteer]) -> Optional[Dict[str, Any]]:
    if volunteer is None:
        return None
    return {
        "id": volunteer.id,
        "name": display_name(volunteer),
        "email": volunteer.email,
        "skills": parse_list(volunteer.skills),
    }


def _event_summary(event: Optional[models.Event], with_description: bool = False) -> Optional[Dict[str, Any]]:
    if event is None:
        return None
    summary = {
        "id": event.id,
        "name": event.name,
        "date": event.event_date,
        "location": event.location,
    }
    if with_description:
        summary["description"] = event.description
    return summary


def _rank(candidates: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    admitted = [c for c in candidates if c["match_score"] >= ADMISSION_THRESHOLD]
    # sorted() is stable: equal scores keep roster order
    return sorted(admitted, key=lambda c: c["match_score"], reverse=True)


class MatchingService:
    """
    Scores volunteers against events, ranks candidates and manages assignment records.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_matches_for_event(self, event_id: int) -> List[Dict[str, Any]]:
        """
        Ranked volunteer candidates for an event. An unknown event yields no candidates.
        """
        event = crud_event.get_event(self.db, event_id)
        if event is None:
            logger.info(f"Event {event_id} not found, no matches")
            return []

        volunteers = crud_volunteer.get_matchable_volunteers(self.db)
        return _rank(
            [{"volunteer": v, "event": event, "match_score": score(v, event)} for v in volunteers]
        )

    def find_matches_for_volunteer(
        self, volunteer_id: int, from_date: Optional[date] = None
    ) -> List[Dict[str, Any]]:
        """
        Ranked upcoming events for a volunteer. Unknown or incomplete profiles yield no candidates.
        """
        volunteer = crud_volunteer.get_volunteer(self.db, volunteer_id)
        if volunteer is None or not volunteer.completed:
            logger.info(f"Volunteer {volunteer_id} not found or profile not completed, no matches")
            return []

        events = crud_event.get_events(
            self.db, upcoming_from=from_date or date.today(), limit=None
        )
        return _rank(
            [{"volunteer": volunteer, "event": e, "match_score": score(volunteer, e)} for e in events]
        )

    def assign_volunteer_to_event(
        self, volunteer_id: int, event_id: int, notes: Optional[str] = None
    ) -> models.VolunteerMatch:
        """
        Creates an "assigned" match and takes one of the event's volunteer slots.

        The capacity check, duplicate check, insert and counter increment share one
        transaction; on any failure nothing is persisted.
        """
        try:
            volunteer = crud_volunteer.get_volunteer(self.db, volunteer_id)
            event = crud_event.get_event(self.db, event_id)
            if volunteer is None or event is None:
                raise VolunteerOrEventNotFoundError()

            if not crud_event.reserve_volunteer_slot(self.db, event_id):
                raise EventFullError()

            if crud_match.get_active_match(self.db, volunteer_id, event_id) is not None:
                raise AlreadyAssignedError()

            try:
                match = crud_match.insert_match(
                    self.db,
                    volunteer_id=volunteer_id,
                    event_id=event_id,
                    match_score=score(volunteer, event),
                    status="assigned",
                    notes=notes or "",
                )
            except IntegrityError as e:
                # A concurrent assignment won the unique index
                raise AlreadyAssignedError() from e

            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(match)
        logger.info(
            f"Assigned volunteer {volunteer_id} to event {event_id} (match {match.id}, score {match.match_score})"
        )
        return match

    def update_match_status(self, match_id: int, status: str) -> models.VolunteerMatch:
        """
        Overwrites a match's status. Status values are validated at the API boundary.

        The event counter follows active matches: cancelling releases a slot and
        reactivating a cancelled match takes one, in the same transaction.
        """
        try:
            match = crud_match.get_match(self.db, match_id)
            if match is None:
                raise MatchNotFoundError()

            was_active = match.status != "cancelled"
            now_active = status != "cancelled"
            if match.event_id is not None:
                if now_active and crud_match.get_active_match(
                    self.db, match.volunteer_id, match.event_id, exclude_id=match.id
                ) is not None:
                    raise AlreadyAssignedError()
                if now_active and not was_active:
                    if not crud_event.reserve_volunteer_slot(self.db, match.event_id):
                        raise EventFullError()
                elif was_active and not now_active:
                    crud_event.release_volunteer_slot(self.db, match.event_id)

            try:
                crud_match.update_match_status(self.db, match_id, status)
            except IntegrityError as e:
                raise AlreadyAssignedError() from e

            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(match)
        logger.info(f"Match {match_id} status set to {status}")
        return match

    def get_all_matches(self) -> List[Dict[str, Any]]:
        """
        Every match with volunteer and event summaries; a summary is None when its row is gone.
        """
        matches = crud_match.get_matches(self.db)
        if not matches:
            return []

        volunteers: Dict[int, Optional[models.Volunteer]] = {}
        events: Dict[int, Optional[models.Event]] = {}
        results = []
        for match in matches:
            if match.volunteer_id not in volunteers:
                volunteers[match.volunteer_id] = crud_volunteer.get_volunteer(self.db, match.volunteer_id)
            event = None
            if match.event_id is not None:
                if match.event_id not in events:
                    events[match.event_id] = crud_event.get_event(self.db, match.event_id)
                event = events[match.event_id]

            record = _match_record(match)
            record["volunteer"] = _volunteer_summary(volunteers[match.volunteer_id])
            record["event"] = _event_summary(event)
            results.append(record)
        return results

    def get_volunteer_history(self, volunteer_id: int) -> List[Dict[str, Any]]:
        """
        All matches of one volunteer, newest first, each with its event summary.
        """
        results = []
        for match in crud_match.get_matches(self.db, volunteer_id=volunteer_id):
            event = crud_event.get_event(self.db, match.event_id) if match.event_id is not None else None
            record = _match_record(match)
            record["event"] = _event_summary(event, with_description=True)
            results.append(record)
        return results
