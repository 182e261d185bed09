# FILE: intern_registry/routes/interns.py
# Endpoint: GET /api/interns (datele pentru tabelul de interni)

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..deps.auth import get_current_intern
from ..deps.db import get_db
from ..models import Intern
from ..schemas import InternOut
from ..services.interns import list_interns

router = APIRouter(prefix="/api/interns", tags=["interns"])


@router.get("", response_model=List[InternOut])
def list_interns_route(
    db: Session = Depends(get_db),
    _: Intern = Depends(get_current_intern),
):
    return list_interns(db)
