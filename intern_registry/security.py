# FILE: intern_registry/security.py
# Scop:
#   - Parole: Argon2 + pepper (secret separat de DB).
#   - JWT access token (1h default), cu issuer/audience + jti.
#
# Ambele helper-e sunt construite o dată în create_app() din Settings și injectate
# în services; nimic de aici nu citește env/config singur.
#
# Debug:
#   - Dacă JWT decode eșuează frecvent, verifică JWT_SECRET + clock drift pe server.
#   - verify() întoarce False pentru hash NULL (interni doar federați).

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Any, Dict
from uuid import uuid4

from jose import jwt, JWTError
from passlib.context import CryptContext

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"


class PasswordHasher:
    """
    Hash one-way cu salt, intenționat lent (Argon2 prin passlib).
    Un hash durează zeci de ms; nu-l chema în buclă.
    """

    def __init__(self, pepper: str = ""):
        self._pepper = pepper
        self._context = CryptContext(schemes=["argon2"], deprecated="auto")

    def _pepper_password(self, password: str) -> str:
        if not isinstance(password, str):
            password = str(password)
        return f"{password}{self._pepper}"

    def hash(self, password: str) -> str:
        return self._context.hash(self._pepper_password(password))

    def verify(self, password: str, password_hash: Optional[str]) -> bool:
        """
        Verificare parolă. Hash lipsă = "niciodată valid prin parolă".
        dummy_verify ține timpul apropiat de o comparație reală.
        """
        if not password_hash:
            self._context.dummy_verify()
            return False

        try:
            return self._context.verify(self._pepper_password(password), password_hash)
        except (ValueError, TypeError):
            # format de hash necunoscut / corupt în DB
            logger.warning("Unrecognized password hash format; treating as mismatch")
            return False


class TokenIssuer:
    """
    Semnează și verifică access token-uri HS256 legate de id-ul intern al internului.

    Payload:
      - sub: Intern.id (ca string)
      - iss/aud: token-ul nu poate fi refolosit între sisteme
      - iat/exp: fereastra de valabilitate (1h default)
      - jti: id unic per token
    """

    def __init__(self, secret: str, *, issuer: str, audience: str, expires_minutes: int = 60):
        self.secret = secret
        self.issuer = issuer
        self.audience = audience
        self.expires_delta = timedelta(minutes=expires_minutes)

    def issue(self, intern_pk: int, extra: Optional[Dict[str, Any]] = None) -> str:
        now = datetime.now(timezone.utc)
        to_encode: Dict[str, Any] = dict(extra or {})
        to_encode.update(
            {
                "sub": str(intern_pk),
                "iss": self.issuer,
                "aud": self.audience,
                "iat": int(now.timestamp()),
                "exp": int((now + self.expires_delta).timestamp()),
                "jti": str(uuid4()),
                "typ": "access",
            }
        )
        return jwt.encode(to_encode, self.secret, algorithm=JWT_ALGORITHM)

    def decode(self, token: str) -> Optional[Dict[str, Any]]:
        """
        Decode + verify. Returnează payload-ul sau None dacă e invalid/expirat.
        """
        try:
            return jwt.decode(
                token,
                self.secret,
                algorithms=[JWT_ALGORITHM],
                audience=self.audience,
                issuer=self.issuer,
            )
        except JWTError:
            return None
