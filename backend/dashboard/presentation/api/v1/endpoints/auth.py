"""Sign-in, guest access, registration and sign-out endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from dashboard.application.schemas.user import LoginRequest, RegisterRequest, UserResponse
from dashboard.application.services import DashboardController
from dashboard.domain.entities import User
from dashboard.domain.exceptions import DuplicateEntityError, InvalidCredentialsError
from dashboard.infrastructure.dependencies import get_controller, get_current_user

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=UserResponse)
async def login(
    data: LoginRequest,
    controller: DashboardController = Depends(get_controller),
) -> UserResponse:
    """Sign in with email and password."""
    user = controller.login(data.email, data.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(InvalidCredentialsError(data.email)),
        )
    return UserResponse.model_validate(user, from_attributes=True)


@router.post("/guest", response_model=UserResponse)
async def guest_login(
    controller: DashboardController = Depends(get_controller),
) -> UserResponse:
    """Start a guest session (no account is created)."""
    user = controller.guest_login()
    return UserResponse.model_validate(user, from_attributes=True)


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    data: RegisterRequest,
    controller: DashboardController = Depends(get_controller),
) -> UserResponse:
    """Create an account and sign it in."""
    user = controller.register(data)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(DuplicateEntityError("User", "email", data.email)),
        )
    return UserResponse.model_validate(user, from_attributes=True)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    controller: DashboardController = Depends(get_controller),
) -> None:
    """Sign out and return to the Dashboard section."""
    controller.logout()


@router.get("/me", response_model=UserResponse)
async def me(user: User = Depends(get_current_user)) -> UserResponse:
    """Return the signed-in identity."""
    return UserResponse.model_validate(user, from_attributes=True)
