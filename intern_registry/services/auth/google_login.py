# FILE: intern_registry/services/auth/google_login.py
# Scop:
#   - Login Google: verificăm ID token-ul, apoi
#       - email cunoscut   => JWT, isNewUser=false
#       - email necunoscut => isNewUser=true + email (clientul apelează apoi update-intern-id)
#   - Aici nu se creează nimic; rândul îl creează completarea profilului.
#
# Debug:
#   - Motivul real (audience, expirare, fetch chei) e în log-ul WARNING;
#     clientul vede doar "Google login failed".

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...errors import ServerError
from ...models import Intern
from ...schemas import GoogleLoginIn, GoogleLoginOut
from ...security import TokenIssuer
from ..google_verifier import GoogleTokenError, GoogleTokenVerifier
from .normalize_email import normalize_email
from .validate_fields import require_fields_or_raise

logger = logging.getLogger(__name__)


def google_login(
    db: Session,
    *,
    data: GoogleLoginIn,
    verifier: GoogleTokenVerifier,
    tokens: TokenIssuer,
) -> GoogleLoginOut:
    require_fields_or_raise(data.token, message="Google token is required")

    try:
        claims = verifier.verify(data.token)
    except GoogleTokenError as exc:
        logger.warning("Google token verification failed: %s", exc)
        raise ServerError("Google login failed")

    email_norm = normalize_email(claims.get("email"))

    try:
        intern = db.query(Intern).filter(Intern.email == email_norm).first()
    except SQLAlchemyError:
        logger.exception("Error during Google login")
        raise ServerError("Google login failed")

    if not intern:
        return GoogleLoginOut(is_new_user=True, email=email_norm)

    return GoogleLoginOut(token=tokens.issue(intern.id), is_new_user=False)
