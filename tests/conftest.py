"""Pytest configuration and fixtures.

Every test gets its own app built by create_app() with:
- an in-memory SQLite database (StaticPool, tables auto-created)
- a FakeGoogleVerifier instead of the real Google JWKS check

Main fixtures:
- settings: test Settings (debug on, fixed secret, fixed Google client id)
- google_verifier: FakeGoogleVerifier; register tokens with .add(token, email)
- app / client: FastAPI app and TestClient
- stored_interns: loader for the Intern rows in the test DB
- signup_payload: a valid signup body
"""
import os

# Env must be in place before intern_registry.config is imported.
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-test-secret-test-secret")
os.environ.setdefault("GOOGLE_CLIENT_ID", "test-client-id")

from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from intern_registry.config import Settings
from intern_registry.main import create_app
from intern_registry.models import Intern
from intern_registry.services.google_verifier import GoogleTokenError

TEST_JWT_SECRET = "unit-test-secret-0123456789abcdef"
TEST_GOOGLE_CLIENT_ID = "test-client-id.apps.googleusercontent.com"


class FakeGoogleVerifier:
    """Stands in for GoogleTokenVerifier: known tokens map to claims."""

    def __init__(self):
        self.tokens: Dict[str, Dict[str, Any]] = {}
        self.calls = []

    def add(self, token: str, email: str, **claims) -> None:
        self.tokens[token] = {"email": email, "email_verified": True, **claims}

    def verify(self, id_token: str) -> Dict[str, Any]:
        self.calls.append(id_token)
        if id_token not in self.tokens:
            raise GoogleTokenError("unknown test token")
        return self.tokens[id_token]


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://",
        db_auto_create=True,
        debug=True,
        jwt_secret=TEST_JWT_SECRET,
        jwt_issuer="intern-registry-test",
        jwt_audience="intern-registry-test-web",
        access_token_expire_minutes=60,
        password_pepper="test-pepper",
        google_client_id=TEST_GOOGLE_CLIENT_ID,
        cors_origins=["http://localhost:3000"],
    )


@pytest.fixture
def google_verifier():
    return FakeGoogleVerifier()


@pytest.fixture
def app(settings, google_verifier):
    application = create_app(settings, google_verifier=google_verifier)
    yield application
    application.state.engine.dispose()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def stored_interns(app):
    """Returns a loader for the rows currently in the DB (fresh session each call)."""

    def _load(email: Optional[str] = None) -> List[Intern]:
        session = app.state.session_factory()
        try:
            query = session.query(Intern)
            if email is not None:
                query = query.filter(Intern.email == email)
            return query.order_by(Intern.id).all()
        finally:
            session.close()

    return _load


@pytest.fixture
def token_issuer(app):
    return app.state.token_issuer


@pytest.fixture
def signup_payload():
    return {
        "internID": "I1",
        "firstName": "Ann",
        "lastName": "Lee",
        "email": "Ann@Test.COM",
        "password": "secret1",
    }
