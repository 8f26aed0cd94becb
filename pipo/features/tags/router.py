"""Tag API routes."""

from fastapi import APIRouter

from pipo.features.tags.routes.admin_tags import router as admin_tags_router
from pipo.features.tags.routes.public_tags import router as public_tags_router

router = APIRouter(tags=["tags"])

router.include_router(admin_tags_router)
router.include_router(public_tags_router)
