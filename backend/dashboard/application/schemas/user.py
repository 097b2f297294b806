"""Pydantic DTOs for accounts, sign-in and profile editing."""

from pydantic import BaseModel, Field

from dashboard.domain.entities import UserRole


class LoginRequest(BaseModel):
    email: str
    password: str | None = None


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=80)
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=1)


class ProfileUpdate(BaseModel):
    """Partial profile edit — only the fields that were sent are merged."""

    name: str | None = Field(None, min_length=1, max_length=80)
    email: str | None = None
    avatar_url: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    """Account as shown to callers — never includes the password."""

    id: int
    name: str
    email: str
    role: UserRole
    avatar_url: str

    model_config = {"from_attributes": True}
