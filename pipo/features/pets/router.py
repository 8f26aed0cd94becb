"""Pet profile API routes."""

from fastapi import APIRouter

from pipo.features.pets.routes.public import router as public_router
from pipo.features.pets.routes.tutor import router as tutor_router

router = APIRouter(tags=["pets"])

router.include_router(public_router)
router.include_router(tutor_router)
