# FILE: intern_registry/services/auth/update_intern_profile.py
# Scop:
#   - Completare profil după login Google ("update intern ID"):
#       - email necunoscut => creăm internul FĂRĂ parolă (cont doar federat)
#       - email cunoscut   => suprascriem internID / firstName / lastName
#   - Returnează un JWT nou în ambele cazuri.
#
# Observații:
#   - Ultima scriere câștigă; nu există verificare de versiune între update-uri concurente.
#   - password_hash nu se atinge aici.

import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...errors import ServerError
from ...models import Intern
from ...schemas import UpdateInternIn, TokenOut
from ...security import TokenIssuer
from .normalize_email import normalize_email
from .validate_fields import require_fields_or_raise

logger = logging.getLogger(__name__)


def update_intern_profile(db: Session, *, data: UpdateInternIn, tokens: TokenIssuer) -> TokenOut:
    require_fields_or_raise(data.email, data.intern_id, data.first_name, data.last_name)

    email_norm = normalize_email(data.email)

    try:
        intern = db.query(Intern).filter(Intern.email == email_norm).first()

        if not intern:
            intern = Intern(
                email=email_norm,
                intern_id=data.intern_id,
                first_name=data.first_name,
                last_name=data.last_name,
                password_hash=None,
            )
            db.add(intern)
        else:
            intern.intern_id = data.intern_id
            intern.first_name = data.first_name
            intern.last_name = data.last_name
            intern.updated_at = datetime.utcnow()

        db.commit()
        db.refresh(intern)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to update intern details")
        raise ServerError("Failed to update intern details")

    return TokenOut(token=tokens.issue(intern.id))
