# FILE: intern_registry/routes/auth_me.py
# Endpoint: GET /api/auth/me

from fastapi import APIRouter, Depends

from ..deps.auth import get_current_intern
from ..models import Intern
from ..schemas import InternOut

router = APIRouter()


@router.get("/me", response_model=InternOut)
def me_route(current_intern: Intern = Depends(get_current_intern)):
    return InternOut.model_validate(current_intern)
