# FILE: intern_registry/routes/auth_signup.py
# Endpoint: POST /api/auth/signup

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..deps.db import get_db
from ..deps.services import get_password_hasher
from ..schemas import SignupIn, MessageOut
from ..security import PasswordHasher
from ..services.auth.signup_intern import signup_intern

router = APIRouter()


@router.post("/signup", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
def signup_route(
    data: SignupIn,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    return signup_intern(db, data=data, hasher=hasher)
