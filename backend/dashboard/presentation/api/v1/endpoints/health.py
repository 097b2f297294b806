"""Health check endpoint — reports readiness without requiring a session."""

from fastapi import APIRouter, Request

from dashboard.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request) -> dict:
    """Returns the application status and whether the store has been seeded."""
    settings = get_settings()
    controller = getattr(request.app.state, "controller", None)
    return {
        "status": "healthy" if controller is not None else "starting",
        "version": settings.app_version,
        "environment": settings.app_env,
        "backend_configured": not settings.missing_backend_settings(),
        "store_revision": controller.revision if controller is not None else None,
    }
