# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from volunteer_matching.crud import crud_volunteer
from tests.test_helpers import create_volunteer

PROFILE = {
    "first_name": "Sam",
    "last_name": "Rivera",
    "city": "Houston",
    "state_code": "TX",
    "skills": ["First Aid", "Teamwork"],
    "availability": ["2099-11-10", "2099-11-11"],
    "preferences": ["animals"],
}


def test_read_volunteers_me(client: TestClient, volunteer_headers):
    response = client.get("/api/v1/volunteers/me", headers=volunteer_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["email"] == "auth_test_volunteer@example.com"
    assert body["completed"] is False
    assert body["skills"] == []


def test_update_profile_completes_it(
    client: TestClient, db_session: Session, authenticated_volunteer_and_token, volunteer_headers
):
    volunteer_id, _ = authenticated_volunteer_and_token

    response = client.put(f"/api/v1/volunteers/{volunteer_id}", json=PROFILE, headers=volunteer_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["completed"] is True
    assert body["skills"] == ["First Aid", "Teamwork"]
    assert body["availability"] == ["2099-11-10", "2099-11-11"]
    db_volunteer = crud_volunteer.get_volunteer(db_session, volunteer_id)
    assert db_volunteer.availability == "2099-11-10,2099-11-11"


def test_clearing_skills_uncompletes_profile(
    client: TestClient, authenticated_volunteer_and_token, volunteer_headers
):
    volunteer_id, _ = authenticated_volunteer_and_token
    client.put(f"/api/v1/volunteers/{volunteer_id}", json=PROFILE, headers=volunteer_headers)

    response = client.put(f"/api/v1/volunteers/{volunteer_id}", json={"skills": []}, headers=volunteer_headers)

    assert response.status_code == 200
    assert response.json()["completed"] is False


def test_update_profile_rejects_comma_in_labels(
    client: TestClient, authenticated_volunteer_and_token, volunteer_headers
):
    volunteer_id, _ = authenticated_volunteer_and_token
    response = client.put(
        f"/api/v1/volunteers/{volunteer_id}", json={"skills": ["First Aid, CPR"]}, headers=volunteer_headers
    )
    assert response.status_code == 422


def test_update_other_profile_forbidden(client: TestClient, db_session: Session, volunteer_headers):
    other = create_volunteer(db_session, email="other@example.com")
    response = client.put(f"/api/v1/volunteers/{other.id}", json=PROFILE, headers=volunteer_headers)
    assert response.status_code == 403


def test_read_volunteers_manager_only(client: TestClient, manager_headers, volunteer_headers):
    assert client.get("/api/v1/volunteers/", headers=volunteer_headers).status_code == 403

    response = client.get("/api/v1/volunteers/", headers=manager_headers)
    assert response.status_code == 200
    assert {v["email"] for v in response.json()} == {"manager@example.com", "auth_test_volunteer@example.com"}

    assert client.get("/api/v1/volunteers/999", headers=manager_headers).status_code == 404


def test_deactivate_volunteer(client: TestClient, db_session: Session, manager_headers):
    volunteer = create_volunteer(db_session)

    response = client.delete(f"/api/v1/volunteers/{volunteer.id}", headers=manager_headers)

    assert response.status_code == 200
    assert response.json()["is_active"] is False
    # Deactivated, not deleted
    assert crud_volunteer.get_volunteer(db_session, volunteer.id) is not None
    assert crud_volunteer.get_matchable_volunteers(db_session) == []


def test_deactivate_other_volunteer_forbidden(client: TestClient, db_session: Session, volunteer_headers):
    other = create_volunteer(db_session, email="other@example.com")
    assert client.delete(f"/api/v1/volunteers/{other.id}", headers=volunteer_headers).status_code == 403
