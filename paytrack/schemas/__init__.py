"""Pydantic request/response schemas."""

from paytrack.schemas.auth import LoginRequest, LoginResponse, RolesResponse, SessionUser
from paytrack.schemas.common import CamelModel, ErrorResponse
from paytrack.schemas.health import HealthResponse
from paytrack.schemas.payments import (
    PaymentCreateRequest,
    PaymentCreateResponse,
    PaymentOut,
    PaymentsListResponse,
    PaymentStatsResponse,
    RevenuePoint,
)
from paytrack.schemas.users import (
    UserCreateRequest,
    UserCreateResponse,
    UserListItem,
    UsersListResponse,
)

__all__ = [
    "CamelModel",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "PaymentCreateRequest",
    "PaymentCreateResponse",
    "PaymentOut",
    "PaymentStatsResponse",
    "PaymentsListResponse",
    "RevenuePoint",
    "RolesResponse",
    "SessionUser",
    "UserCreateRequest",
    "UserCreateResponse",
    "UserListItem",
    "UsersListResponse",
]
