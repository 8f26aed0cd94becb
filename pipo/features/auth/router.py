"""Authentication API routes."""

from fastapi import APIRouter

from pipo.features.auth.routes.login import router as login_router
from pipo.features.auth.routes.password import router as password_router
from pipo.features.auth.routes.setup import router as setup_router
from pipo.features.auth.routes.signup import router as signup_router

router = APIRouter(prefix="/auth", tags=["auth"])

# Include all route handlers
router.include_router(signup_router)
router.include_router(login_router)
router.include_router(password_router)
router.include_router(setup_router)
