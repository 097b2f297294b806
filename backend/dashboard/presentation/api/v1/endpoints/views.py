"""Section navigation and rendered view endpoints."""

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder

from dashboard.application.schemas.navigation import NavigateRequest, RenderedViewResponse
from dashboard.application.services import DashboardController
from dashboard.domain.entities import RenderedView, User
from dashboard.infrastructure.dependencies import get_controller, get_current_user

router = APIRouter(prefix="/view", tags=["Views"])


def _view_to_response(view: RenderedView) -> RenderedViewResponse:
    """Map a RenderedView to its API response."""
    return RenderedViewResponse(
        kind=view.kind,
        section=view.section,
        revision=view.revision,
        content=jsonable_encoder(view.content),
    )


@router.get("", response_model=RenderedViewResponse)
async def get_view(
    controller: DashboardController = Depends(get_controller),
) -> RenderedViewResponse:
    """Render the active section (the sign-in view when signed out)."""
    return _view_to_response(controller.render_view())


@router.put("", response_model=RenderedViewResponse)
async def navigate(
    data: NavigateRequest,
    controller: DashboardController = Depends(get_controller),
    _user: User = Depends(get_current_user),
) -> RenderedViewResponse:
    """Switch the active section and render it."""
    return _view_to_response(controller.navigate(data.section))
