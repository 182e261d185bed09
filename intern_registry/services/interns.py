# FILE: intern_registry/services/interns.py
# Scop:
#   - Partea de citire pentru tabelul de interni (ID, prenume/nume, email).
#   - password_hash nu iese din modul (InternOut nu are un astfel de câmp).

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import ServerError
from ..models import Intern
from ..schemas import InternOut

logger = logging.getLogger(__name__)


def list_interns(db: Session) -> List[InternOut]:
    try:
        rows = db.query(Intern).order_by(Intern.created_at.asc(), Intern.id.asc()).all()
    except SQLAlchemyError:
        logger.exception("Failed to list interns")
        raise ServerError("Failed to load interns")

    return [InternOut.model_validate(row) for row in rows]
