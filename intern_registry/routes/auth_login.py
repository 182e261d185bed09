# FILE: intern_registry/routes/auth_login.py
# Endpoint: POST /api/auth/login

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..deps.db import get_db
from ..deps.services import get_password_hasher, get_token_issuer
from ..schemas import LoginIn, TokenOut
from ..security import PasswordHasher, TokenIssuer
from ..services.auth.login_intern import login_intern

router = APIRouter()


@router.post("/login", response_model=TokenOut)
def login_route(
    data: LoginIn,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenIssuer = Depends(get_token_issuer),
):
    return login_intern(db, data=data, hasher=hasher, tokens=tokens)
