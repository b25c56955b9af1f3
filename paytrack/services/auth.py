"""Login flow and the role-based authorization gate."""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

import bcrypt
from sqlalchemy.orm import Session

from paytrack.core.config import get_settings
from paytrack.core.errors import AuthenticationError
from paytrack.core.security import TokenClaims, issue_token, verify_password, verify_token
from paytrack.models import User

if TYPE_CHECKING:
    from paytrack.core.config import Settings

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"
DENIED_INVALID_TOKEN = "missing or invalid token"
DENIED_INSUFFICIENT_PRIVILEGE = "insufficient privilege"


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: User


@dataclass(frozen=True)
class AuthorizationDecision:
    """Outcome of authorize(): claims are set only when allowed."""

    allowed: bool
    reason: str | None = None
    claims: TokenClaims | None = None


@lru_cache
def _dummy_hash(rounds: int) -> str:
    """Hash checked for unknown usernames so both failure paths cost one bcrypt verify."""
    return bcrypt.hashpw(b"paytrack-unknown-user", bcrypt.gensalt(rounds=rounds)).decode(
        "utf-8"
    )


def login(
    db: Session,
    username: str,
    password: str,
    settings: "Settings | None" = None,
) -> LoginResult:
    """
    Authenticate username/password (exact, case-sensitive match) and mint an access token.

    Unknown usernames and wrong passwords raise the same AuthenticationError.
    """
    settings = settings or get_settings()
    user = db.query(User).filter(User.username == username).first()
    if user is None:
        verify_password(password, _dummy_hash(settings.BCRYPT_ROUNDS))
        logger.warning("Login failed", extra={"reason": "unknown_user"})
        raise AuthenticationError(INVALID_CREDENTIALS)
    if not verify_password(password, user.password_hash):
        logger.warning("Login failed", extra={"reason": "bad_password", "user_id": user.id})
        raise AuthenticationError(INVALID_CREDENTIALS)

    claims = TokenClaims(user_id=user.id, username=user.username, role=user.role)
    token = issue_token(claims, settings)
    logger.info("Login succeeded", extra={"user_id": user.id, "role": user.role})
    return LoginResult(token=token, user=user)


def authorize(
    token: str | None,
    required_role: str,
    settings: "Settings | None" = None,
) -> AuthorizationDecision:
    """Allow only a valid token whose role equals required_role exactly (no hierarchy)."""
    claims = verify_token(token, settings)
    if claims is None:
        return AuthorizationDecision(allowed=False, reason=DENIED_INVALID_TOKEN)
    if claims.role != required_role:
        return AuthorizationDecision(allowed=False, reason=DENIED_INSUFFICIENT_PRIVILEGE)
    return AuthorizationDecision(allowed=True, claims=claims)
