"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dashboard.config import get_settings
from dashboard.infrastructure.dependencies import build_controller
from dashboard.infrastructure.logging.log_config import setup_logging
from dashboard.infrastructure.supabase import build_backend_client
from dashboard.presentation.api.v1.router import router as v1_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — wire the backend client, seed the store, build the controller."""
    settings = get_settings()
    setup_logging(settings)

    # 1. Backend client: raises ConfigurationError when SUPABASE_* are missing
    backend_client = build_backend_client(settings)
    app.state.backend_client = backend_client

    try:
        # 2. Entity store seeded from YAML, owned by the session controller
        app.state.controller = build_controller(settings)
        logger.info("Dashboard ready (revision=%d)", app.state.controller.revision)

        yield
    finally:
        await backend_client.aclose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes under /api/v1
    app.include_router(v1_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "dashboard.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
