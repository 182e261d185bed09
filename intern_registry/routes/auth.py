# FILE: intern_registry/routes/auth.py
# Router principal /api/auth, include endpoint-uri din fișiere separate.
#
# Debug:
#   - Dacă /docs nu arată un endpoint, verifică include_router().

from fastapi import APIRouter

from .auth_signup import router as signup_router
from .auth_login import router as login_router
from .auth_google_login import router as google_login_router
from .auth_update_intern import router as update_intern_router
from .auth_me import router as me_router

router = APIRouter(prefix="/api/auth", tags=["auth"])

router.include_router(signup_router)
router.include_router(login_router)
router.include_router(google_login_router)
router.include_router(update_intern_router)
router.include_router(me_router)
