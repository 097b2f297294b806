"""Profile endpoint — edit the signed-in identity."""

from fastapi import APIRouter, Depends

from dashboard.application.schemas.user import ProfileUpdate, UserResponse
from dashboard.application.services import DashboardController
from dashboard.domain.entities import User
from dashboard.infrastructure.dependencies import get_controller, get_current_user
from dashboard.presentation.api.v1.endpoints.outcomes import ensure_applied

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.patch("", response_model=UserResponse)
async def update_profile(
    data: ProfileUpdate,
    controller: DashboardController = Depends(get_controller),
    user: User = Depends(get_current_user),
) -> UserResponse:
    """Merge the sent fields into the signed-in profile."""
    ensure_applied(controller.update_profile(data), "User", user.id)
    return UserResponse.model_validate(controller.current_user, from_attributes=True)
