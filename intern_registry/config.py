# FILE: intern_registry/config.py
# Scop:
#   - Setări centralizate, citite o dată din env (+ .env) într-un dataclass.
#   - Tot ce e sub create_app() primește valorile explicit.
#
# Debug:
#   - În afara DEBUG, startup-ul refuză să pornească fără JWT_SECRET / GOOGLE_CLIENT_ID.
#   - Dacă login-ul Google pică mereu, verifică dacă GOOGLE_CLIENT_ID e același
#     client web pe care îl folosește frontend-ul (e claim-ul `aud` așteptat).

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()  # încarcă .env din root-ul proiectului


def _get_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


def _get_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return int(default)


def _get_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return float(default)


def _get_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    # DB
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./data/interns.db")

    # Bootstrap DEV (prod: false + migrații)
    db_auto_create: bool = _get_bool("DB_AUTO_CREATE", "true")

    # Debug
    debug: bool = _get_bool("DEBUG", "false")

    # JWT
    jwt_secret: str = os.getenv("JWT_SECRET", "")
    jwt_issuer: str = os.getenv("JWT_ISSUER", "intern-registry")
    jwt_audience: str = os.getenv("JWT_AUDIENCE", "intern-registry-web")
    access_token_expire_minutes: int = _get_int("ACCESS_TOKEN_EXPIRE_MINUTES", 60)

    # Pepper parole (secret ținut în afara DB)
    password_pepper: str = os.getenv("PASSWORD_PEPPER", "")

    # Google Sign-In
    google_client_id: str = os.getenv("GOOGLE_CLIENT_ID", "")
    google_certs_url: str = os.getenv("GOOGLE_CERTS_URL", "https://www.googleapis.com/oauth2/v3/certs")
    google_http_timeout_seconds: float = _get_float("GOOGLE_HTTP_TIMEOUT_SECONDS", 5.0)

    # CORS (implicit dev server-ul React)
    cors_origins: List[str] = field(default_factory=lambda: _get_list("CORS_ORIGINS", "http://localhost:3000"))


settings = Settings()
