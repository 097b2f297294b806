"""Domain entity for dashboard user accounts."""

from dataclasses import dataclass, replace
from enum import Enum


class UserRole(str, Enum):
    """Access level of an account."""

    ADMIN = "Admin"
    USER = "User"
    GUEST = "Guest"


@dataclass
class User:
    """A dashboard account."""

    id: int
    name: str
    email: str
    role: UserRole = UserRole.USER
    avatar_url: str = ""
    password: str | None = None

    def without_password(self) -> "User":
        """Return a copy safe to hold as the signed-in identity."""
        return replace(self, password=None)
