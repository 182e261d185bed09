# FILE: intern_registry/services/auth/login_intern.py
# Scop:
#   - Login cu parolă: căutare după email normalizat + verificare argon2 + JWT 1h.
#
# Anti-enumerare:
#   - Email inexistent, intern federat (fără parolă) și parolă greșită dau toate
#     același 401 "Invalid credentials".

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...errors import InvalidCredentialsError, ServerError
from ...models import Intern
from ...schemas import LoginIn, TokenOut
from ...security import PasswordHasher, TokenIssuer
from .normalize_email import normalize_email
from .validate_fields import require_fields_or_raise

logger = logging.getLogger(__name__)


def login_intern(db: Session, *, data: LoginIn, hasher: PasswordHasher, tokens: TokenIssuer) -> TokenOut:
    require_fields_or_raise(data.email, data.password, message="Email and password are required")

    email_norm = normalize_email(data.email)

    try:
        intern = db.query(Intern).filter(Intern.email == email_norm).first()
    except SQLAlchemyError:
        logger.exception("Error during login")
        raise ServerError("Internal server error during login")

    password_hash = intern.password_hash if intern else None
    if not hasher.verify(data.password, password_hash) or intern is None:
        logger.info("Login failed for a submitted email")
        raise InvalidCredentialsError("Invalid credentials")

    return TokenOut(token=tokens.issue(intern.id))
