"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
"""

import logging
from typing import Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class MatchingError(Exception):
    """Base class for business-rule failures raised by the matching service."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Matching operation failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class VolunteerOrEventNotFoundError(MatchingError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Volunteer or event not found"


class EventFullError(MatchingError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Event is full"


class AlreadyAssignedError(MatchingError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Volunteer already assigned to this event"


class MatchNotFoundError(MatchingError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Match not found"


async def matching_exception_handler(request: Request, exc: MatchingError) -> JSONResponse:
    """
    Translates matching service errors into JSON responses with the error's status code.
    """
    logger.warning(f"Matching error in {request.url.path}: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})
