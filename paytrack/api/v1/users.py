"""User management endpoints: list users and admin-only user creation."""

import json
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as SchemaError
from sqlalchemy.orm import Session

from paytrack.api.v1.auth import get_app_settings, require_admin, require_reader
from paytrack.core.config import Settings
from paytrack.core.database import get_db
from paytrack.core.errors import ValidationError
from paytrack.core.security import TokenClaims
from paytrack.schemas.common import ErrorResponse
from paytrack.schemas.users import (
    UserCreateRequest,
    UserCreateResponse,
    UserListItem,
    UsersListResponse,
)
from paytrack.services.users import create_user, list_users

router = APIRouter()


@router.get("", response_model=UsersListResponse)
def get_users(
    db: Annotated[Session, Depends(get_db)],
    _reader: Annotated[TokenClaims | None, Depends(require_reader)],
) -> UsersListResponse:
    """List all users without password hashes."""
    return UsersListResponse(
        users=[UserListItem.model_validate(u) for u in list_users(db)]
    )


async def admin_user_create_body(
    request: Request,
    _admin: Annotated[TokenClaims, Depends(require_admin)],
) -> UserCreateRequest:
    """
    Dependency: parse the POST /users body only after the caller is known to be an admin.

    Declaring the body as a route parameter would let FastAPI decode it before
    require_admin runs, so a malformed body from a non-admin would surface as 400.
    """
    try:
        data = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValidationError("Invalid JSON body") from None
    try:
        return UserCreateRequest.model_validate(data)
    except SchemaError as e:
        raise RequestValidationError(e.errors(include_url=False)) from None


@router.post(
    "",
    response_model=UserCreateResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": UserCreateRequest.model_json_schema(by_alias=True)
                }
            },
        }
    },
)
def post_user(
    db: Annotated[Session, Depends(get_db)],
    admin: Annotated[TokenClaims, Depends(require_admin)],
    body: Annotated[UserCreateRequest, Depends(admin_user_create_body)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> UserCreateResponse:
    """
    Create a user (admin only).

    - 403 if the Bearer token is missing, invalid or not an admin's, whatever the body
    - 400 if the body is not valid JSON, misses a field, or the role is not one of USER_ROLES
    - 409 if the username is already taken
    """
    user = create_user(db, admin, body.username, body.password, body.role, settings)
    return UserCreateResponse(user_id=user.id)
