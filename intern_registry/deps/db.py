# FILE: intern_registry/deps/db.py
# Scop:
#   - Dependency standard pentru Session SQLAlchemy (per request).
#   - Session factory stă pe app.state (construit în create_app()).
#
# Debug:
#   - Dacă ai conexiuni blocate, verifică dacă requesturile se închid corect
#     și dacă ai vreun await care ține session deschis.

from typing import Generator

from fastapi import Request
from sqlalchemy.orm import Session


def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
