"""FastAPI dependency injection — wires infrastructure to application layer."""

from fastapi import Depends, HTTPException, Request, status

from dashboard.config import Settings, get_settings
from dashboard.application.services import (
    DashboardController,
    EntityStore,
    ViewSelector,
)
from dashboard.domain.entities import StoreSnapshot, User
from dashboard.infrastructure.seed import YamlSeedLoader


def build_controller(
    settings: Settings | None = None,
    snapshot: StoreSnapshot | None = None,
) -> DashboardController:
    """Build a controller over ``snapshot``, or over the seed file when omitted."""
    settings = settings or get_settings()
    if snapshot is None:
        snapshot = YamlSeedLoader(settings.seed_file).load()
    return DashboardController(
        EntityStore(snapshot),
        view_selector=ViewSelector(preview_limit=settings.dashboard_preview_limit),
        avatar_base_url=settings.avatar_base_url,
    )


def get_controller(request: Request) -> DashboardController:
    """Provides the process-wide controller created during startup."""
    controller = getattr(request.app.state, "controller", None)
    if controller is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Dashboard is not initialised",
        )
    return controller


def get_current_user(
    controller: DashboardController = Depends(get_controller),
) -> User:
    """Provides the signed-in identity; 401 when nobody is signed in."""
    user = controller.current_user
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not signed in",
        )
    return user
