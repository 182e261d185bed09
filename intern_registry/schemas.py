# FILE: intern_registry/schemas.py
# Scop:
#   - Schemas Pydantic (FastAPI), camelCase pe fir ca să se potrivească cu clientul React.
#
# Observații:
#   - Câmpurile din request sunt Optional intenționat: "lipsă" trebuie să iasă
#     400 {"message": ...} din servicii, nu 422 din FastAPI.
#   - Doar string-urile sunt curățate (strip). Orice alt tip (listă, obiect, bool)
#     ajunge la validarea pydantic => 400 "Invalid request body".
#   - Parola nu se atinge niciodată (fără strip, fără conversie).

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _strip_if_str(v):
    if isinstance(v, str):
        return v.strip()
    return v


class MessageOut(BaseModel):
    message: str


class SignupIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    intern_id: Optional[str] = Field(default=None, alias="internID")
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("intern_id", "first_name", "last_name", "email", mode="before")
    @classmethod
    def _strip_strings(cls, v):
        return _strip_if_str(v)


class LoginIn(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def _strip_email(cls, v):
        return _strip_if_str(v)


class GoogleLoginIn(BaseModel):
    token: Optional[str] = None

    @field_validator("token", mode="before")
    @classmethod
    def _strip_token(cls, v):
        return _strip_if_str(v)


class UpdateInternIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = None
    intern_id: Optional[str] = Field(default=None, alias="internId")
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")

    @field_validator("email", "intern_id", "first_name", "last_name", mode="before")
    @classmethod
    def _strip_strings(cls, v):
        return _strip_if_str(v)


class TokenOut(BaseModel):
    token: str


class GoogleLoginOut(BaseModel):
    """
    Două forme (câmpurile None sunt excluse din răspuns):
      - intern existent: {"token": ..., "isNewUser": false}
      - email necunoscut: {"isNewUser": true, "email": ...}
    """
    model_config = ConfigDict(populate_by_name=True)

    token: Optional[str] = None
    is_new_user: bool = Field(alias="isNewUser")
    email: Optional[str] = None


class InternOut(BaseModel):
    """Rând din tabelul de interni (fără parolă / hash)."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    intern_id: str = Field(alias="internID")
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
