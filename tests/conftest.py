# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import os

# Safety check to prevent tests from running against production database
os.environ["TESTING"] = "1"
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from volunteer_matching.app import app
from volunteer_matching.db.database import Base, get_db
from volunteer_matching.dependencies import create_access_token
from tests.test_helpers import create_volunteer

# Create test database engine and session
TEST_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
    echo=False
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(name="db_session", scope="function")
def db_session_fixture():
    """
    Creates a new database session for each test, with all tables created.
    """
    Base.metadata.create_all(bind=test_engine)
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()
        # Drop all tables after the test to ensure a clean slate
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(name="notify_mocks")
def notify_mocks_fixture(mocker):
    """
    Replaces the e-mail background handlers so requests never reach SendGrid.
    """
    return {
        "assignment": mocker.patch("volunteer_matching.events.match_handlers.notify_assignment"),
        "status": mocker.patch("volunteer_matching.events.match_handlers.notify_status_change"),
    }


@pytest.fixture(name="client")
def client_fixture(db_session: Session, notify_mocks):
    """
    Provides a FastAPI TestClient that overrides the get_db dependency
    to use the test database session.
    """
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(name="authenticated_volunteer_and_token")
def authenticated_volunteer_and_token_fixture(client: TestClient):
    """
    Registers a volunteer through the API and logs in to get a bearer token.
    """
    email = "auth_test_volunteer@example.com"
    password = "testpassword"

    register_response = client.post(
        "/api/v1/register",
        json={
            "email": email,
            "password": password,
            "first_name": "Auth",
            "last_name": "Tester",
        }
    )
    assert register_response.status_code == 201

    token_response = client.post(
        "/api/v1/login",
        data={"username": email, "password": password}
    )
    assert token_response.status_code == 200
    token = token_response.json()["access_token"]

    return register_response.json()["id"], token


@pytest.fixture(name="manager_headers")
def manager_headers_fixture(db_session: Session):
    manager = create_volunteer(
        db_session, email="manager@example.com", first_name="Maria", last_name="Manager",
        is_manager=True, completed=False,
    )
    token = create_access_token({"sub": manager.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(name="volunteer_headers")
def volunteer_headers_fixture(authenticated_volunteer_and_token):
    _, token = authenticated_volunteer_and_token
    return {"Authorization": f"Bearer {token}"}
