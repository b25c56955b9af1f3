"""Request/response schemas for user management."""

from datetime import datetime

from pydantic import Field, field_validator

from paytrack.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)
from paytrack.schemas.common import CamelModel, ensure_utc


class UserCreateRequest(CamelModel):
    """Body for POST /users (admin only). Role is checked against USER_ROLES."""

    username: str = Field(..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN)
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    role: str = Field(..., min_length=1, max_length=32)


class UserCreateResponse(CamelModel):
    message: str = "User created successfully."
    user_id: int


class UserListItem(CamelModel):
    """User entry for list responses (no password)."""

    id: int
    username: str
    role: str
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def normalize_tz(cls, v: datetime) -> datetime:
        return ensure_utc(v)


class UsersListResponse(CamelModel):
    """Response for GET /users."""

    users: list[UserListItem]
