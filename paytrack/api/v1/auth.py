"""JWT login and auth dependencies (require_admin, require_reader)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from paytrack.core.config import Settings
from paytrack.core.database import get_db
from paytrack.core.errors import AuthenticationError, AuthorizationError
from paytrack.core.roles import ADMIN_ROLE
from paytrack.core.security import TokenClaims, verify_token
from paytrack.schemas.auth import LoginRequest, LoginResponse, RolesResponse, SessionUser
from paytrack.schemas.common import ErrorResponse
from paytrack.services.auth import authorize, login

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Dependency: the Settings instance the app was built with."""
    return request.app.state.settings


def _bearer_token(credentials: HTTPAuthorizationCredentials | None) -> str | None:
    return credentials.credentials if credentials is not None else None


def require_admin(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> TokenClaims:
    """Dependency: require a valid Bearer JWT with role 'admin'. Raises 403 otherwise."""
    decision = authorize(_bearer_token(credentials), ADMIN_ROLE, settings)
    if not decision.allowed or decision.claims is None:
        raise AuthorizationError(decision.reason or "Forbidden")
    return decision.claims


def require_reader(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> TokenClaims | None:
    """
    Dependency for read endpoints. Open unless REQUIRE_AUTH_FOR_READS is set,
    in which case any valid token is accepted and anything else is a 401.
    """
    if not settings.REQUIRE_AUTH_FOR_READS:
        return None
    claims = verify_token(_bearer_token(credentials), settings)
    if claims is None:
        raise AuthenticationError("Not authenticated")
    return claims


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def post_login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> LoginResponse:
    """
    Authenticate with username and password; returns a JWT valid for JWT_EXPIRE_MINUTES.
    Include the token in the Authorization header as: Bearer <token>
    """
    result = login(db, body.username, body.password, settings)
    return LoginResponse(
        token=result.token,
        user=SessionUser.model_validate(result.user),
    )


@router.get("/roles", response_model=RolesResponse)
def get_roles(settings: Annotated[Settings, Depends(get_app_settings)]) -> RolesResponse:
    """Roles accepted by POST /users; the client renders its role picker from this."""
    return RolesResponse(roles=list(settings.USER_ROLES), admin_role=ADMIN_ROLE)
