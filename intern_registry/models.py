# FILE: intern_registry/models.py
# Scop:
#   - Model DB: Intern (singura entitate).
#
# Observații:
#   - email e stocat normalizat (trim + lower) și are UNIQUE => fără dubluri de case.
#   - password_hash e NULL pentru interni doar federați (creați prin login Google
#     + completare profil). Rândurile astea nu se pot loga niciodată cu parolă.
#   - intern_id e dat de om și intenționat NU e unic.

from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime

from .database import Base


class Intern(Base):
    __tablename__ = "interns"

    id = Column(Integer, primary_key=True, index=True)

    # Identitate
    intern_id = Column(String(64), nullable=False)
    first_name = Column(String(128), nullable=False)
    last_name = Column(String(128), nullable=False)

    # Email (normalizat)
    email = Column(String(255), unique=True, nullable=False, index=True)

    # Parolă (hash argon2); NULL => cont doar federat
    password_hash = Column(String(255), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=True)

    def __repr__(self) -> str:
        return f"<Intern id={self.id} email={self.email!r}>"
