# FILE: intern_registry/deps/auth.py
# Scop:
#   - get_current_intern pe Bearer token (access token).
#
# Observație:
#   - Doar endpoint-urile de citire (/api/auth/me, /api/interns) folosesc dependency-ul;
#     signup/login/google-login/update-intern-id sunt publice.

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from ..errors import InvalidCredentialsError
from ..models import Intern
from ..security import TokenIssuer
from .db import get_db
from .services import get_token_issuer

bearer_scheme = HTTPBearer(auto_error=False)

INVALID_TOKEN_MESSAGE = "Invalid or expired token"


def get_current_intern(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenIssuer = Depends(get_token_issuer),
    db: Session = Depends(get_db),
) -> Intern:
    if credentials is None:
        raise InvalidCredentialsError(INVALID_TOKEN_MESSAGE)

    payload = tokens.decode(credentials.credentials)
    if not payload or "sub" not in payload:
        raise InvalidCredentialsError(INVALID_TOKEN_MESSAGE)

    try:
        intern_pk = int(payload["sub"])
    except (TypeError, ValueError):
        raise InvalidCredentialsError(INVALID_TOKEN_MESSAGE)

    intern = db.query(Intern).filter(Intern.id == intern_pk).first()
    if not intern:
        raise InvalidCredentialsError(INVALID_TOKEN_MESSAGE)

    return intern
