# FILE: intern_registry/services/auth/signup_intern.py
# Scop:
#   - Signup: validări + dedup email + hash argon2 + insert.
#
# Duplicate:
#   - Email existent => 409 (pre-check), iar indexul UNIQUE prinde cursa dintre
#     două signup-uri concurente (IntegrityError => tot 409).
#
# Debug:
#   - Orice altă eroare DB e logată aici și iese ca 500 generic.

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ...errors import ConflictError, ServerError
from ...models import Intern
from ...schemas import SignupIn, MessageOut
from ...security import PasswordHasher
from .normalize_email import normalize_email
from .validate_fields import require_fields_or_raise, validate_email_or_raise

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "An intern with this email already exists"


def signup_intern(db: Session, *, data: SignupIn, hasher: PasswordHasher) -> MessageOut:
    require_fields_or_raise(data.intern_id, data.first_name, data.last_name, data.email, data.password)
    validate_email_or_raise(data.email)

    email_norm = normalize_email(data.email)

    try:
        existing = db.query(Intern).filter(Intern.email == email_norm).first()
    except SQLAlchemyError:
        logger.exception("Error during signup (lookup)")
        raise ServerError("Internal server error during signup")

    if existing:
        logger.info("Signup rejected: email already registered (intern id=%s)", existing.id)
        raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

    try:
        password_hash = hasher.hash(data.password)
    except Exception:
        logger.exception("Error during signup (password hashing)")
        raise ServerError("Internal server error during signup")

    intern = Intern(
        intern_id=data.intern_id,
        first_name=data.first_name,
        last_name=data.last_name,
        email=email_norm,
        password_hash=password_hash,
    )

    db.add(intern)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Signup race: email inserted concurrently")
        raise ConflictError(DUPLICATE_EMAIL_MESSAGE)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error during signup (insert)")
        raise ServerError("Internal server error during signup")

    logger.info("Intern registered (id=%s)", intern.id)
    return MessageOut(message="Intern registered successfully!")
