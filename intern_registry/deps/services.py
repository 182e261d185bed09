# FILE: intern_registry/deps/services.py
# Scop:
#   - Dă rutelor colaboratorii construiți o dată la startup (vezi create_app()).
#   - Testele îi înlocuiesc pasând propriile instanțe în create_app().

from fastapi import Request

from ..security import PasswordHasher, TokenIssuer
from ..services.google_verifier import GoogleTokenVerifier


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_google_verifier(request: Request) -> GoogleTokenVerifier:
    return request.app.state.google_verifier
