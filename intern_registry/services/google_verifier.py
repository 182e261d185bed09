# FILE: intern_registry/services/google_verifier.py
# Scop:
#   - Verifică ID token-urile Google Sign-In ("credential" primit de clientul React).
#   - Cheile de semnare Google (JWKS) vin prin PyJWKClient (fetch + cache).
#
# Verificări:
#   - semnătură RS256 cu cheia care are `kid`-ul din header
#   - exp / iat
#   - aud == client id-ul nostru Google
#   - iss = accounts.google.com (cu sau fără https://)
#   - email prezent, email_verified diferit de false
#
# Debug:
#   - "Unknown signing key" imediat după o rotire de chei Google e normal o dată;
#     refacem fetch-ul JWKS, dar cel mult o dată la MIN_REFRESH_INTERVAL_SECONDS.
#   - Dacă toate apelurile pică pe "audience", GOOGLE_CLIENT_ID e clientul greșit.

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

import jwt
from jwt import PyJWKClient
from jwt.exceptions import InvalidTokenError, PyJWKClientError, PyJWKSetError

logger = logging.getLogger(__name__)

GOOGLE_ISSUERS = ("accounts.google.com", "https://accounts.google.com")
DEFAULT_CERTS_URL = "https://www.googleapis.com/oauth2/v3/certs"
KEYS_LIFESPAN_SECONDS = 3600
MIN_REFRESH_INTERVAL_SECONDS = 60


class GoogleTokenError(Exception):
    """Raised when a Google ID token cannot be verified."""


class GoogleTokenVerifier:
    """
    Black box pentru login-ul Google:
      - primește config-ul (client id, URL certs, timeout) prin constructor
      - nu citește env-ul
      - orice eșec iese ca GoogleTokenError
    """

    def __init__(
        self,
        client_id: str,
        *,
        certs_url: str = DEFAULT_CERTS_URL,
        timeout_seconds: float = 5.0,
        jwks_client: Optional[PyJWKClient] = None,
    ):
        self.client_id = client_id
        self.certs_url = certs_url
        self.jwks_client = jwks_client or PyJWKClient(
            certs_url,
            cache_keys=True,
            lifespan=KEYS_LIFESPAN_SECONDS,
            timeout=timeout_seconds,
        )
        self._last_forced_refresh: Optional[float] = None

    def verify(self, id_token: str) -> Dict[str, Any]:
        if not self.client_id:
            raise GoogleTokenError("Google client id is not configured")
        if not id_token:
            raise GoogleTokenError("Empty ID token")

        try:
            header = jwt.get_unverified_header(id_token)
        except InvalidTokenError as exc:
            raise GoogleTokenError(f"Malformed ID token: {exc}") from exc

        signing_key = self._signing_key(header.get("kid"))

        try:
            claims = jwt.decode(
                id_token,
                signing_key.key,
                algorithms=["RS256"],
                audience=self.client_id,
                options={"require": ["exp", "iat", "iss", "aud"]},
            )
        except InvalidTokenError as exc:
            raise GoogleTokenError(f"ID token rejected: {exc}") from exc

        if claims.get("iss") not in GOOGLE_ISSUERS:
            raise GoogleTokenError(f"Unexpected issuer: {claims.get('iss')}")
        if not claims.get("email"):
            raise GoogleTokenError("ID token has no email claim")
        if claims.get("email_verified") in (False, "false"):
            raise GoogleTokenError("Google account email is not verified")

        return claims

    def _signing_key(self, kid: Optional[str]):
        if not kid:
            raise GoogleTokenError("ID token header has no kid")

        key = self._match(kid, refresh=False)
        if key is not None:
            return key

        # kid necunoscut: Google a rotit cheile sau token-ul e fals.
        # Un singur refetch per interval, ca token-urile false să nu genereze trafic.
        now = time.monotonic()
        if self._last_forced_refresh is not None and now - self._last_forced_refresh < MIN_REFRESH_INTERVAL_SECONDS:
            raise GoogleTokenError(f"Unknown signing key: {kid}")

        self._last_forced_refresh = now
        key = self._match(kid, refresh=True)
        if key is None:
            raise GoogleTokenError(f"Unknown signing key: {kid}")
        return key

    def _match(self, kid: str, *, refresh: bool):
        try:
            keys = self.jwks_client.get_signing_keys(refresh=refresh)
        except (PyJWKClientError, PyJWKSetError) as exc:
            logger.warning("Failed to fetch Google signing keys from %s: %s", self.certs_url, exc)
            raise GoogleTokenError("Could not fetch Google signing keys") from exc

        return next((key for key in keys if key.key_id == kid), None)
