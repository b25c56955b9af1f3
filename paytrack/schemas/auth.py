"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field

from paytrack.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)
from paytrack.schemas.common import CamelModel


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(
        ..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN, description="Username"
    )
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password"
    )


class SessionUser(CamelModel):
    """Sanitized user returned with a login token (never includes the password hash)."""

    id: int
    username: str
    role: str


class LoginResponse(CamelModel):
    """JWT returned after successful login; send it as `Authorization: Bearer <token>`."""

    message: str = "Login successful"
    token: str = Field(..., description="JWT access token")
    user: SessionUser


class RolesResponse(CamelModel):
    """Roles accepted on user creation, so clients do not hardcode them."""

    roles: list[str]
    admin_role: str
