"""Store failures surface as opaque {message} errors, never as internal detail."""
from unittest.mock import patch

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from intern_registry.deps.auth import get_current_intern
from intern_registry.models import Intern


@pytest.fixture
def broken_store(app):
    """Drops the interns table: every query on it raises OperationalError."""
    Intern.__table__.drop(app.state.engine)
    return app


def _commit_raises(exc):
    return patch.object(Session, "commit", side_effect=exc)


def test_signup_store_failure(client, broken_store, signup_payload):
    response = client.post("/api/auth/signup", json=signup_payload)

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error during signup"}


def test_login_store_failure(client, broken_store):
    response = client.post("/api/auth/login", json={"email": "ann@test.com", "password": "secret1"})

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error during login"}


def test_google_login_store_failure(client, broken_store, google_verifier):
    google_verifier.add("g-token", "ann@test.com")

    response = client.post("/api/auth/google-login", json={"token": "g-token"})

    assert response.status_code == 500
    assert response.json() == {"message": "Google login failed"}


def test_update_intern_store_failure(client, broken_store):
    response = client.post(
        "/api/auth/update-intern-id",
        json={"email": "fed@test.com", "internId": "F1", "firstName": "Fed", "lastName": "Eral"},
    )

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to update intern details"}


def test_list_interns_store_failure(app, client, broken_store):
    app.dependency_overrides[get_current_intern] = lambda: Intern(id=1, email="ann@test.com")
    try:
        response = client.get("/api/interns", headers={"Authorization": "Bearer any"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to load interns"}


def test_signup_unique_race_is_conflict(client, signup_payload, stored_interns):
    race = IntegrityError("INSERT INTO interns", {}, Exception("UNIQUE constraint failed: interns.email"))

    with _commit_raises(race):
        response = client.post("/api/auth/signup", json=signup_payload)

    assert response.status_code == 409
    assert response.json() == {"message": "An intern with this email already exists"}
    assert stored_interns() == []


def test_signup_insert_failure(client, signup_payload, stored_interns):
    with _commit_raises(OperationalError("INSERT INTO interns", {}, Exception("disk I/O error"))):
        response = client.post("/api/auth/signup", json=signup_payload)

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error during signup"}
    assert "disk" not in response.text
    assert stored_interns() == []


def test_update_intern_commit_failure(client, stored_interns):
    with _commit_raises(OperationalError("UPDATE interns", {}, Exception("database is locked"))):
        response = client.post(
            "/api/auth/update-intern-id",
            json={"email": "fed@test.com", "internId": "F1", "firstName": "Fed", "lastName": "Eral"},
        )

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to update intern details"}
    assert "locked" not in response.text
    assert stored_interns() == []
