# FILE: intern_registry/routes/auth_google_login.py
# Endpoint: POST /api/auth/google-login
#
# Răspunsul are două forme, deci câmpurile None sunt scoase (response_model_exclude_none).

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..deps.db import get_db
from ..deps.services import get_google_verifier, get_token_issuer
from ..schemas import GoogleLoginIn, GoogleLoginOut
from ..security import TokenIssuer
from ..services.auth.google_login import google_login
from ..services.google_verifier import GoogleTokenVerifier

router = APIRouter()


@router.post("/google-login", response_model=GoogleLoginOut, response_model_exclude_none=True)
def google_login_route(
    data: GoogleLoginIn,
    db: Session = Depends(get_db),
    verifier: GoogleTokenVerifier = Depends(get_google_verifier),
    tokens: TokenIssuer = Depends(get_token_issuer),
):
    return google_login(db, data=data, verifier=verifier, tokens=tokens)
