# FILE: intern_registry/main.py
# Scop:
#   - Entry-point FastAPI: create_app() construiește DB, hasher, token issuer și
#     verificatorul Google din Settings și le pune pe app.state.
#   - Bootstrap DB DOAR în dev (DB_AUTO_CREATE=true). În prod se trece pe migrații.
#   - În prod: hard-fail dacă lipsește config critic (JWT_SECRET / GOOGLE_CLIENT_ID).
#
# Debug:
#   - Serverul NU pornește => caută RuntimeError "Invalid config" în log.
#   - Toate răspunsurile de eroare sunt {"message": ...}; detaliile sunt doar în log.
#
# Rulare:
#   uvicorn intern_registry.main:app --reload

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, settings
from .database import Base, make_engine, make_session_factory
from . import models  # înregistrează modelele pe Base.metadata
from .errors import AppError
from .routes import auth, interns
from .security import PasswordHasher, TokenIssuer
from .services.google_verifier import GoogleTokenVerifier

logger = logging.getLogger(__name__)


def _validate_config_or_die(cfg: Settings) -> None:
    """
    Hard fail în producție dacă lipsesc secrete critice.
    Fără JWT_SECRET token-urile pot fi falsificate; fără GOOGLE_CLIENT_ID orice
    login Google ar pica la runtime.
    """
    if cfg.debug:
        return

    missing: list[str] = []
    if not cfg.jwt_secret or len(cfg.jwt_secret) < 32:
        missing.append("JWT_SECRET (min 32 chars)")
    if not cfg.google_client_id:
        missing.append("GOOGLE_CLIENT_ID")

    if missing:
        raise RuntimeError("Invalid config in PROD: " + ", ".join(missing))


def configure_logging(cfg: Settings) -> None:
    logging.basicConfig(
        level=logging.INFO if cfg.debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )


def create_app(cfg: Optional[Settings] = None, *, google_verifier: Optional[GoogleTokenVerifier] = None) -> FastAPI:
    cfg = cfg or settings
    _validate_config_or_die(cfg)

    engine = make_engine(cfg.database_url)
    if cfg.db_auto_create:
        Base.metadata.create_all(bind=engine)

    app = FastAPI(
        title="Intern Registry",
        description="Intern signup, password and Google login, profile completion, intern table.",
        version="1.0.0",
    )

    app.state.settings = cfg
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)
    app.state.password_hasher = PasswordHasher(pepper=cfg.password_pepper)
    app.state.token_issuer = TokenIssuer(
        cfg.jwt_secret,
        issuer=cfg.jwt_issuer,
        audience=cfg.jwt_audience,
        expires_minutes=cfg.access_token_expire_minutes,
    )
    app.state.google_verifier = google_verifier or GoogleTokenVerifier(
        cfg.google_client_id,
        certs_url=cfg.google_certs_url,
        timeout_seconds=cfg.google_http_timeout_seconds,
    )

    # Client React pe alt origin (dev server / host static)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth.router)
    app.include_router(interns.router)

    @app.get("/health")
    def health():
        return {"ok": True, "env": "debug" if cfg.debug else "prod"}

    _register_exception_handlers(app, cfg)
    return app


def _register_exception_handlers(app: FastAPI, cfg: Settings) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # doar locațiile: input-ul brut poate conține parola
        locations = [err.get("loc") for err in exc.errors()]
        logger.info("Rejected request body at %s %s: %s", request.method, request.url.path, locations)
        return JSONResponse(status_code=400, content={"message": "Invalid request body"})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        - DEBUG: expunem textul excepției (doar dev/staging)
        - PROD: răspuns generic, fără detalii interne
        """
        logger.exception("Unhandled server error at %s %s", request.method, request.url.path)

        if cfg.debug:
            return JSONResponse(status_code=500, content={"message": f"Unhandled error: {exc}"})

        return JSONResponse(status_code=500, content={"message": "Internal server error"})


configure_logging(settings)

app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("intern_registry.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
