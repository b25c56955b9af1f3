"""Password hashing and JWT issuance/verification for authentication."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

from paytrack.core.config import get_settings

if TYPE_CHECKING:
    from paytrack.core.config import Settings

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 128

# bcrypt only looks at the first 72 bytes of input.
BCRYPT_MAX_BYTES = 72

REQUIRED_TOKEN_CLAIMS = ("sub", "username", "role", "iat", "exp")


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by an access token. Role is fixed at mint time."""

    user_id: int
    username: str
    role: str


def hash_password(plain_password: str, settings: "Settings | None" = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    settings = settings or get_settings()
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash. Malformed hashes never match."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def issue_token(
    claims: TokenClaims,
    settings: "Settings | None" = None,
    now: datetime | None = None,
) -> str:
    """Create a signed JWT with sub (user id), username, role, iat and exp."""
    settings = settings or get_settings()
    issued_at = now or datetime.now(UTC)
    expire = issued_at + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(claims.user_id),
        "username": claims.username,
        "role": claims.role,
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_token(token: str, settings: "Settings | None" = None) -> dict[str, Any]:
    """
    Decode and validate JWT signature, expiry and required claims; return payload.
    Raises jwt.PyJWTError on invalid or expired token.
    """
    settings = settings or get_settings()
    return jwt.decode(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": list(REQUIRED_TOKEN_CLAIMS)},
    )


def verify_token(token: str | None, settings: "Settings | None" = None) -> TokenClaims | None:
    """Return the token's claims, or None if it is missing, malformed, forged or expired."""
    if not token:
        return None
    try:
        payload = decode_token(token, settings)
    except jwt.PyJWTError:
        return None
    username = payload.get("username")
    role = payload.get("role")
    if not isinstance(username, str) or not isinstance(role, str):
        return None
    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        return None
    return TokenClaims(user_id=user_id, username=username, role=role)
