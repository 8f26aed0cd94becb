"""Main FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from pipo.core.logging_config import configure_logging
from pipo.core.middleware import request_context_middleware
from pipo.core.settings import get_settings
from pipo.db.session import close_db_session, create_all_tables, init_db_session
from pipo.features.auth.router import router as auth_router
from pipo.features.pets.router import router as pets_router
from pipo.features.tags.router import router as tags_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.
    Handles startup and shutdown events.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting %s v%s", settings.app_name, settings.app_version)

    init_db_session()
    if settings.database_url.startswith("sqlite"):
        # No migrations for local SQLite runs
        await create_all_tables()
    logger.info("Database session initialized.")

    yield

    # Shutdown
    logger.info("Shutting down application")
    await close_db_session()
    logger.info("Database engine disposed.")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Pet identification tags: provisioning, activation and public profiles",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-Id", "Content-Disposition", "Location"],
    )
    app.middleware("http")(request_context_middleware)

    # Include routers
    app.include_router(auth_router, prefix="/api/v1")
    app.include_router(pets_router, prefix="/api/v1")
    app.include_router(tags_router, prefix="/api/v1")

    # Uploaded pet photos
    app.mount(
        settings.upload_url_prefix,
        StaticFiles(directory=settings.upload_dir, check_dir=False),
        name="uploads",
    )

    @app.get("/health")
    async def health_check() -> dict[str, str]:  # pyright: ignore[reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "pipo.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if not settings.debug else "debug",
    )
