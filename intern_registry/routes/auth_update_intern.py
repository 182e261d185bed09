# FILE: intern_registry/routes/auth_update_intern.py
# Endpoint: POST /api/auth/update-intern-id

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..deps.db import get_db
from ..deps.services import get_token_issuer
from ..schemas import UpdateInternIn, TokenOut
from ..security import TokenIssuer
from ..services.auth.update_intern_profile import update_intern_profile

router = APIRouter()


@router.post("/update-intern-id", response_model=TokenOut)
def update_intern_route(
    data: UpdateInternIn,
    db: Session = Depends(get_db),
    tokens: TokenIssuer = Depends(get_token_issuer),
):
    return update_intern_profile(db, data=data, tokens=tokens)
