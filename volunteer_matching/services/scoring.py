"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT

Compatibility scoring between a volunteer profile and an event.

The score is built from four independently capped contributions:

    skills        60  share of the event's required skills the volunteer has
    availability  25  volunteer is available on the event date
    location      10  volunteer's state code appears in the event location
    preferences    5  a preference keyword appears in the event name/description

Inputs are normalized once (``volunteer_facts`` / ``event_facts``) so that
``calculate_match_score`` only ever sees canonical, immutable values.
"""

import math
from datetime import date
from typing import Any, FrozenSet, List, NamedTuple, Tuple

SKILL_WEIGHT = 60
AVAILABILITY_WEIGHT = 25
LOCATION_WEIGHT = 10
PREFERENCE_WEIGHT = 5

MIN_SCORE = 0
MAX_SCORE = 100


class VolunteerFacts(NamedTuple):
    skills: FrozenSet[str]
    availability: FrozenSet[str]
    state_code: str
    preferences: Tuple[str, ...]


class EventFacts(NamedTuple):
    name: str
    description: str
    location: str
    required_skills: FrozenSet[str]
    date: str


def parse_list(value: Any, separator: str = ",") -> List[str]:
    """
    Normalizes a stored list value.

    Lists, tuples and sets are used as-is, delimited strings are split and trimmed,
    anything else is treated as empty. Blank entries are dropped.
    """
    if isinstance(value, (list, tuple, set, frozenset)):
        items = [str(item).strip() for item in value if item is not None]
    elif isinstance(value, str):
        items = [item.strip() for item in value.split(separator)]
    else:
        return []
    return [item for item in items if item]


def parse_list_of_dates(value: Any) -> List[Any]:
    # date objects inside a list are kept as-is for _iso
    if isinstance(value, (list, tuple, set, frozenset)):
        return [item for item in value if item]
    return parse_list(value)


def _iso(value: Any) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip() if value else ""


def volunteer_facts(volunteer) -> VolunteerFacts:
    return VolunteerFacts(
        skills=frozenset(parse_list(getattr(volunteer, "skills", None))),
        availability=frozenset(_iso(d) for d in parse_list_of_dates(getattr(volunteer, "availability", None))),
        state_code=(getattr(volunteer, "state_code", None) or "").strip(),
        preferences=tuple(parse_list(getattr(volunteer, "preferences", None))),
    )


def event_facts(event) -> EventFacts:
    return EventFacts(
        name=getattr(event, "name", None) or "",
        description=getattr(event, "description", None) or "",
        location=getattr(event, "location", None) or "",
        required_skills=frozenset(parse_list(getattr(event, "required_skills", None))),
        date=_iso(getattr(event, "event_date", None)),
    )


def _skill_score(volunteer: VolunteerFacts, event: EventFacts) -> float:
    if not event.required_skills:
        return SKILL_WEIGHT
    matching = len(volunteer.skills & event.required_skills)
    return SKILL_WEIGHT * min(matching, len(event.required_skills)) / len(event.required_skills)


def _availability_score(volunteer: VolunteerFacts, event: EventFacts) -> float:
    return AVAILABILITY_WEIGHT if event.date and event.date in volunteer.availability else 0


def _location_score(volunteer: VolunteerFacts, event: EventFacts) -> float:
    if not volunteer.state_code or not event.location:
        return 0
    return LOCATION_WEIGHT if volunteer.state_code.lower() in event.location.lower() else 0


def _preference_score(volunteer: VolunteerFacts, event: EventFacts) -> float:
    haystack = f"{event.name}\n{event.description}".lower()
    if any(pref.lower() in haystack for pref in volunteer.preferences):
        return PREFERENCE_WEIGHT
    return 0


def calculate_match_score(volunteer: VolunteerFacts, event: EventFacts) -> int:
    """
    Pure scoring over normalized inputs. Always returns an integer in [0, 100].
    """
    total = (
        _skill_score(volunteer, event)
        + _availability_score(volunteer, event)
        + _location_score(volunteer, event)
        + _preference_score(volunteer, event)
    )
    # Half-up: 22.5 -> 23
    rounded = int(math.floor(total + 0.5))
    return max(MIN_SCORE, min(MAX_SCORE, rounded))


def score(volunteer, event) -> int:
    """
    Scores a volunteer (ORM row or any object with the same attributes) against an event.
    """
    return calculate_match_score(volunteer_facts(volunteer), event_facts(event))
