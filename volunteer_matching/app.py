# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from volunteer_matching.api.v1.endpoints import auth, events, matching, volunteers
from volunteer_matching.config import settings
from volunteer_matching.exceptions import MatchingError, matching_exception_handler

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("FastAPI application starting up. Database migrations are managed by Alembic.")
    yield
    logger.info("FastAPI application shutting down.")


app = FastAPI(
    title="Volunteer Matching API",
    description="API for matching volunteers with events and managing their assignments.",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

app.add_exception_handler(MatchingError, matching_exception_handler)

app.include_router(auth.router, prefix="/api/v1")
app.include_router(volunteers.router, prefix="/api/v1")
app.include_router(events.router, prefix="/api/v1")
app.include_router(matching.router, prefix="/api/v1")
